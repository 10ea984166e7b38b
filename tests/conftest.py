"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from fen4.chess.board import DEFAULT_FEN4, Board, default_board

# A busy mid-game document: tag block, dead pieces, walls, multi-byte shapes
COMPLICATED_FEN4 = """R-0,0,0,0-0,0,0,0-0,0,0,0-0,0,0,0-0-{'lives':(50,50,50,50),'enPassant':('i3:i4','c6:d6','f12:f11','l9:k9')}-
3,yA,yP,yN,yB,yR,yD,yQ,yK,3/
3,yE,yH,1,yC,yV,yG,yF,yW,3/
3,yJ,yL,1,yβ,yα,yY,yS,yI,3/
bK,bW,bI,2,yP,yT,yZ,yO,2,gJ,gE,gA/
bQ,bF,bS,3,yδ,yγ,yM,2,gL,gH,gP/
bD,bG,bY,bO,bM,dK,dQ,dD,dR,1,gP,2,gN/
bR,bV,bα,bZ,bγ,dB,dN,dP,X,gδ,gT,gβ,gC,gB/
bB,bC,bβ,bT,bδ,dF,dL,dJ,dT,gγ,gZ,gα,gV,gR/
bN,2,bP,1,dδ,dγ,dα,dZ,gM,gO,gY,gG,gD/
bP,bH,bL,2,rM,rγ,rδ,3,gS,gF,gQ/
bA,bE,bJ,2,rO,rZ,rT,rP,2,gI,gW,gK/
3,rI,rS,rY,rα,rβ,1,rL,rJ,3/
3,rW,rF,rG,rV,rC,1,rH,rE,3/
3,rK,rQ,rD,rR,rB,rN,rP,rA,3"""


@pytest.fixture
def starting_board() -> Board:
    return default_board()


@pytest.fixture
def starting_fen4() -> str:
    return DEFAULT_FEN4


@pytest.fixture
def complicated_fen4() -> str:
    return COMPLICATED_FEN4


@pytest.fixture
def empty_board_fen4() -> str:
    """Scenario header followed by 14 empty ranks"""
    return "R-0,0,0,0-1,1,1,1-1,1,1,1-0,0,0,0-0-\n" + "/\n".join(["14"] * 14)
