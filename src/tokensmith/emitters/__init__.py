"""
Text emitters for resolved tokens.

- css: ``tokens.css`` custom-property stylesheet
- sass: ``_tokens.sass`` variables partial
"""

from .css import generate_css
from .sass import generate_sass

__all__ = ["generate_css", "generate_sass"]
