"""Kivy front end for the radar chart core."""
