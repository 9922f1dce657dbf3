"""PySide6 front end for the radar chart core."""
