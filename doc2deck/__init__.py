"""
doc2deck

Converts a structured document tree into a slide-deck model ready for a
presentation renderer.
"""

from .generator import PresentationBuilder, document_to_presentation
from .options import ConversionOptions
from .models import (
    Break, ContentSlide, GraphicFrame, MathElem, MetadataSlide, Paragraph,
    Picture, Presentation, Run, Table, TextBox, TitleSlide, TwoColumnSlide,
)
from .styles import ParaProps, RunProps

__all__ = [
    'PresentationBuilder', 'document_to_presentation', 'ConversionOptions',
    'Presentation', 'MetadataSlide', 'TitleSlide', 'ContentSlide', 'TwoColumnSlide',
    'Picture', 'GraphicFrame', 'TextBox', 'Table', 'Paragraph', 'Run', 'Break',
    'MathElem', 'ParaProps', 'RunProps',
]
