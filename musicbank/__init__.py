"""MusicBank: Korean song lyrics from Gemini, formatted for SUNO AI.

Modules inside this package import each other by bare name; ``main.py``
puts this directory first on ``sys.path`` before importing them.
"""

__version__ = "1.0.0"
