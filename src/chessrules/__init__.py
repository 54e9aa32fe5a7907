"""chessrules — chess move validation with check and checkmate detection."""

__version__ = "0.1.0"
