"""Front end of the Rotate language compiler: source reading, lexing and compilation logs."""

__version__ = "0.0.1"