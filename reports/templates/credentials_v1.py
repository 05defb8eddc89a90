"""
Student Credentials Report Template (v1)

Lays out bulk student credentials as a fixed-column table on A4 pages.
"""

from django.conf import settings

from core.services.credentials.records import normalize_records
from core.services.reporting.canvas import (
    draw_banner,
    draw_centred_text,
    draw_rule,
    draw_text,
)
from core.services.reporting.styles import (
    FONT_BOLD,
    FONT_REGULAR,
    HEADER_ROW_HEIGHT,
    HEADER_RULE_GAP,
    INSTRUCTION_LINE_HEIGHT,
    PAGE_MARGIN,
    PAGE_WIDTH,
    ROW_HEIGHT,
    ROW_LIMIT_Y,
    TABLE_START_Y,
    get_font_sizes,
    get_report_colors,
)


DEFAULT_ORGANIZATION_NAME = 'Organization'

PRODUCT_TITLE = 'CareerNest'
REPORT_SUBTITLE = 'Student Credentials Report'
CONFIDENTIAL_NOTICE = 'CONFIDENTIAL - Keep this document secure'
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

COLUMN_TITLES = ['#', 'Name', 'Email', 'Roll No.', 'Password', 'Course', 'Year']
COLUMN_X = [40, 65, 210, 360, 430, 500, 560]
COLUMN_WIDTHS = [20, 135, 150, 60, 60, 60, 40]

INSTRUCTIONS_HEADING = 'Instructions:'
INSTRUCTIONS = [
    '1. Share these credentials with respective students securely.',
    '2. Students should login to Career Nest with the given email and password.',
    '3. Students should change their password after first login.',
    '4. Keep this document confidential and secure.',
    'Password format: {RollNumber}@CN (e.g., CS001@CN)',
]

# Space the instructions block needs below the last row before a page break.
INSTRUCTIONS_MIN_SPACE = 60


def resolve_organization_name(organization_name):
    """Organization name to print, falling back to the configured placeholder."""
    if organization_name and str(organization_name).strip():
        return str(organization_name).strip()
    return getattr(settings, 'CREDENTIALS_REPORT_DEFAULT_ORGANIZATION', DEFAULT_ORGANIZATION_NAME)


class CredentialsReportV1:
    """Template for student credentials reports version 1"""

    def __init__(self):
        self.colors = get_report_colors()
        self.sizes = get_font_sizes()

    def draw(self, canvas, context: dict) -> dict:
        """
        Draw the whole report.

        Expected context structure:
        {
            'credentials': list of dicts or CredentialRecord,
            'organization_name': str (optional),
            'generated_at': datetime,
        }

        Returns:
            {'pages': int, 'rows': int, 'rows_per_page': list[int]}
        """
        records = normalize_records(context.get('credentials', []))
        organization_name = resolve_organization_name(context.get('organization_name'))

        canvas.setTitle(f"{REPORT_SUBTITLE} - {organization_name}")
        canvas.setAuthor(PRODUCT_TITLE)

        self._draw_header_block(canvas, organization_name, context['generated_at'])

        rows_per_page = [0]
        y = self._draw_table_header(canvas, TABLE_START_Y)

        for index, record in enumerate(records, start=1):
            if y > ROW_LIMIT_Y:
                canvas.showPage()
                rows_per_page.append(0)
                y = self._draw_table_header(canvas, PAGE_MARGIN)

            self._draw_row(canvas, y, record.as_row(index))
            rows_per_page[-1] += 1
            y += ROW_HEIGHT

        y += 10
        if y > ROW_LIMIT_Y - INSTRUCTIONS_MIN_SPACE:
            canvas.showPage()
            rows_per_page.append(0)
            y = PAGE_MARGIN
        self._draw_instructions(canvas, y)

        return {
            'pages': len(rows_per_page),
            'rows': sum(rows_per_page),
            'rows_per_page': rows_per_page,
        }

    def _draw_header_block(self, canvas, organization_name, generated_at):
        """Banner with title, then organization, timestamp and notice (first page only)."""
        draw_banner(canvas, self.colors['brand'])
        draw_centred_text(
            canvas, 10, PRODUCT_TITLE,
            FONT_BOLD, self.sizes['title'], self.colors['banner_text']
        )
        draw_centred_text(
            canvas, 38, REPORT_SUBTITLE,
            FONT_REGULAR, self.sizes['subtitle'], self.colors['banner_text']
        )
        draw_centred_text(
            canvas, 68, f"Organization: {organization_name}",
            FONT_REGULAR, self.sizes['organization'], self.colors['body']
        )
        draw_centred_text(
            canvas, 84, f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
            FONT_REGULAR, self.sizes['meta'], self.colors['body']
        )
        draw_centred_text(
            canvas, 98, CONFIDENTIAL_NOTICE,
            FONT_BOLD, self.sizes['meta'], self.colors['warning']
        )

    def _draw_table_header(self, canvas, y):
        """Draw column titles and the rule under them; returns the new cursor."""
        for title, x in zip(COLUMN_TITLES, COLUMN_X):
            draw_text(canvas, x, y, title, FONT_BOLD, self.sizes['table_header'], self.colors['brand'])
        y += HEADER_ROW_HEIGHT
        draw_rule(canvas, y, PAGE_MARGIN, PAGE_WIDTH - PAGE_MARGIN, self.colors['brand'])
        return y + HEADER_RULE_GAP

    def _draw_row(self, canvas, y, cells):
        for cell, x, width in zip(cells, COLUMN_X, COLUMN_WIDTHS):
            draw_text(
                canvas, x, y, cell,
                FONT_REGULAR, self.sizes['cell'], self.colors['cell'],
                max_width=width,
            )

    def _draw_instructions(self, canvas, y):
        draw_text(canvas, PAGE_MARGIN, y, INSTRUCTIONS_HEADING, FONT_REGULAR, self.sizes['instructions'], self.colors['muted'])
        y += INSTRUCTION_LINE_HEIGHT
        for line in INSTRUCTIONS:
            draw_text(canvas, PAGE_MARGIN, y, line, FONT_REGULAR, self.sizes['instructions'], self.colors['muted'])
            y += INSTRUCTION_LINE_HEIGHT
        return y
