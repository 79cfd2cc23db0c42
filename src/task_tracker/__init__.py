"""In-process task tracker with a line-oriented console."""
