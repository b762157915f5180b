from tokenbridge.input.adapter import FigmaInput, FigmaInputAdapter
from tokenbridge.input.parser import parse_variables
from tokenbridge.output.figma.adapter import FigmaOutputAdapter
from tokenbridge.output.figma.models import FigmaOutputOptions
from tokenbridge.output.figma.safety import check_source_safety
from tokenbridge.output.figma.styles import extract_style_tokens
from tokenbridge.output.figma.transformer import transform_to_figma_variables
from tokenbridge.schema.serde import theme_from_dict, theme_to_dict
from tokenbridge.schema.tokens import ThemeFile, Token, TokenCollection, TokenGroup

__version__ = "0.1.0"


__all__ = [
    "FigmaInput",
    "FigmaInputAdapter",
    "FigmaOutputAdapter",
    "FigmaOutputOptions",
    "ThemeFile",
    "Token",
    "TokenCollection",
    "TokenGroup",
    "check_source_safety",
    "extract_style_tokens",
    "parse_variables",
    "theme_from_dict",
    "theme_to_dict",
    "transform_to_figma_variables",
]
