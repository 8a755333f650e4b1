# src/tictactoe/types.py

from __future__ import annotations
from typing import Hashable, Optional, NewType

Piece = Hashable              # opaque token, only compared with ==
Cell = Optional[Piece]        # None == empty
Move = NewType("Move", int)   # cell index 0..width*width-1
