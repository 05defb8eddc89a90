"""
Canvas Helpers

Provides helper functions for drawing banners, text cells and rules.

Positions passed to these helpers are measured from the top edge of the
page, the way a table cursor moves; they are converted to ReportLab's
bottom-left coordinate system here.
"""

from reportlab.pdfbase import pdfmetrics

from .styles import PAGE_WIDTH, PAGE_HEIGHT, BANNER_HEIGHT, ELLIPSIS


def to_baseline(top_y, font_name, font_size):
    """
    Convert a top-of-text position into a ReportLab baseline.

    Args:
        top_y: Distance from the top edge of the page to the top of the text
        font_name: Font used for the text
        font_size: Font size in points

    Returns:
        Baseline y coordinate in PDF space
    """
    return PAGE_HEIGHT - top_y - pdfmetrics.getAscent(font_name, font_size)


def truncate_to_width(text, max_width, font_name, font_size):
    """
    Shorten text so that it fits max_width, marking the cut with an ellipsis.

    Text that already fits is returned unchanged. Text is never wrapped.
    The cut point is found by bisecting on prefix length, so very long
    values cost a handful of width measurements.
    """
    if pdfmetrics.stringWidth(text, font_name, font_size) <= max_width:
        return text

    # Longest prefix that still fits together with the ellipsis
    low, high = 0, len(text)
    while low < high:
        mid = (low + high + 1) // 2
        if pdfmetrics.stringWidth(text[:mid] + ELLIPSIS, font_name, font_size) <= max_width:
            low = mid
        else:
            high = mid - 1
    return text[:low].rstrip() + ELLIPSIS


def draw_text(canvas, x, top_y, text, font_name, font_size, color, max_width=None):
    """
    Draw a single line of text whose top edge sits at top_y.

    Args:
        canvas: ReportLab canvas object
        x: Left edge of the text
        top_y: Distance from the top of the page
        text: Text to draw (newlines are flattened to spaces)
        font_name: Font to draw with
        font_size: Font size in points
        color: Fill colour for the glyphs
        max_width: Optional width the text is clipped to with an ellipsis
    """
    text = ' '.join(text.splitlines())
    if max_width is not None:
        text = truncate_to_width(text, max_width, font_name, font_size)

    canvas.setFont(font_name, font_size)
    canvas.setFillColor(color)
    canvas.drawString(x, to_baseline(top_y, font_name, font_size), text)


def draw_centred_text(canvas, top_y, text, font_name, font_size, color):
    """Draw a line of text centred horizontally on the page."""
    canvas.setFont(font_name, font_size)
    canvas.setFillColor(color)
    canvas.drawCentredString(
        PAGE_WIDTH / 2,
        to_baseline(top_y, font_name, font_size),
        text
    )


def draw_banner(canvas, color, height=BANNER_HEIGHT):
    """
    Draw a filled banner spanning the full page width at the top of the page.

    Args:
        canvas: ReportLab canvas object
        color: Fill colour of the banner
        height: Banner height in points
    """
    canvas.saveState()
    canvas.setFillColor(color)
    canvas.rect(0, PAGE_HEIGHT - height, PAGE_WIDTH, height, stroke=0, fill=1)
    canvas.restoreState()


def draw_rule(canvas, top_y, x_start, x_end, color, line_width=1):
    """Draw a horizontal rule between x_start and x_end at top_y."""
    canvas.saveState()
    canvas.setStrokeColor(color)
    canvas.setLineWidth(line_width)
    y = PAGE_HEIGHT - top_y
    canvas.line(x_start, y, x_end, y)
    canvas.restoreState()
