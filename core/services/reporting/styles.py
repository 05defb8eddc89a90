"""
PDF Styling

Colours, fonts and fixed layout constants shared by canvas-drawn reports.
"""

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4


PAGE_WIDTH, PAGE_HEIGHT = A4
PAGE_MARGIN = 40

# Rows are never drawn below this line; leaves room for the page bottom.
ROW_LIMIT_Y = PAGE_HEIGHT - 60

BANNER_HEIGHT = 60
TABLE_START_Y = 120
HEADER_ROW_HEIGHT = 14
HEADER_RULE_GAP = 6
ROW_HEIGHT = 14
INSTRUCTION_LINE_HEIGHT = 12

ELLIPSIS = '...'

FONT_REGULAR = 'Helvetica'
FONT_BOLD = 'Helvetica-Bold'


def get_report_colors():
    """
    Get the standard report colour palette.

    Returns:
        Dictionary of reportlab Color objects keyed by role
    """
    return {
        'brand': colors.HexColor('#4A90E2'),
        'banner_text': colors.HexColor('#FFFFFF'),
        'body': colors.HexColor('#000000'),
        'warning': colors.HexColor('#D9534F'),
        'cell': colors.HexColor('#2C3E50'),
        'muted': colors.HexColor('#666666'),
    }


def get_font_sizes():
    """Font sizes used by the credential report, keyed by element."""
    return {
        'title': 22,
        'subtitle': 12,
        'organization': 10,
        'meta': 9,
        'table_header': 10,
        'cell': 9,
        'instructions': 9,
    }
