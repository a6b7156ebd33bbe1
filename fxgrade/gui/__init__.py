"""PyQt6 front end for the grade calculator."""
