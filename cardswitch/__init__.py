"""Mock ISO 8583 card switch: authorization and reversal flows."""
__version__ = "1.0.0"
