"""Host adapters that drive a line editor from GUI key events."""
