"""Non-visual colour and geometry engine."""
