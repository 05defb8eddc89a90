"""
Tests for the student credentials PDF report
"""

import time
from datetime import datetime
from io import BytesIO

from django.test import SimpleTestCase, override_settings
from pypdf import PdfReader

from core.services.credentials import CredentialRecord
from reports.credentials_pdf import build_credentials_pdf_result, create_bulk_credentials_pdf
from reports.templates.credentials_v1 import CONFIDENTIAL_NOTICE, INSTRUCTIONS


GENERATED_AT = datetime(2024, 1, 1, 12, 0, 0)


def _page_texts(pdf_bytes):
    reader = PdfReader(BytesIO(pdf_bytes))
    return [page.extract_text() for page in reader.pages]


def _students(count):
    return [
        {
            'name': f'Student {i}',
            'email': f'student{i}@x.com',
            'rollNumber': f'CS{i:03d}',
            'password': f'CS{i:03d}@CN',
            'course': 'CS',
            'year': '1st Year',
        }
        for i in range(1, count + 1)
    ]


class CredentialsPDFReportTestCase(SimpleTestCase):
    """Test cases for credentials PDF generation"""

    def test_single_student_scenario(self):
        """One student renders on one page with header, row and instructions"""
        credentials = [{
            'name': 'Jane Doe',
            'email': 'jane@x.com',
            'rollNumber': 'CS001',
            'password': 'CS001@CN',
            'course': 'CS',
            'year': '2nd Year',
        }]

        result = build_credentials_pdf_result(credentials, 'Test Org', generated_at=GENERATED_AT)

        self.assertTrue(result.pdf_bytes.startswith(b'%PDF'))
        self.assertEqual(result.page_count, 1)
        self.assertEqual(result.row_count, 1)

        texts = _page_texts(result.pdf_bytes)
        self.assertEqual(len(texts), 1)
        text = texts[0]
        for expected in ('Jane Doe', 'jane@x.com', 'CS001', 'CS001@CN', 'CS', '2nd Year'):
            self.assertIn(expected, text)
        self.assertIn('Organization: Test Org', text)
        self.assertIn('CareerNest', text)
        self.assertIn('Student Credentials Report', text)
        self.assertIn('Generated: 2024-01-01 12:00:00', text)
        self.assertIn(CONFIDENTIAL_NOTICE, text)
        self.assertIn('Instructions:', text)
        for line in INSTRUCTIONS:
            self.assertIn(line, text)

    def test_create_bulk_credentials_pdf_returns_bytes(self):
        pdf_bytes = create_bulk_credentials_pdf(_students(3), 'Test Org')

        self.assertIsInstance(pdf_bytes, bytes)
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))

    def test_empty_list_has_header_and_instructions_only(self):
        result = build_credentials_pdf_result([], 'Test Org', generated_at=GENERATED_AT)

        self.assertEqual(result.row_count, 0)
        self.assertEqual(result.page_count, 1)
        text = _page_texts(result.pdf_bytes)[0]
        self.assertIn('Roll No.', text)
        self.assertIn(CONFIDENTIAL_NOTICE, text)
        self.assertIn('Instructions:', text)

    def test_default_organization_name(self):
        for organization_name in (None, '', '   '):
            with self.subTest(organization_name=organization_name):
                result = build_credentials_pdf_result([], organization_name, generated_at=GENERATED_AT)
                self.assertIn('Organization: Organization', _page_texts(result.pdf_bytes)[0])

    @override_settings(CREDENTIALS_REPORT_DEFAULT_ORGANIZATION='Career Nest Partner')
    def test_configured_default_organization_name(self):
        result = build_credentials_pdf_result([], None, generated_at=GENERATED_AT)
        self.assertIn('Organization: Career Nest Partner', _page_texts(result.pdf_bytes)[0])

    def test_roll_number_fallback(self):
        credentials = [
            {'name': 'Snake Case', 'roll_number': 'CS101'},
            {'name': 'Both Keys', 'rollNumber': 'CS202', 'roll_number': 'CS999'},
        ]

        result = build_credentials_pdf_result(credentials, 'Test Org', generated_at=GENERATED_AT)
        text = _page_texts(result.pdf_bytes)[0]

        self.assertIn('CS101', text)
        self.assertIn('CS202', text)
        self.assertNotIn('CS999', text)

    def test_record_without_fields_renders_row(self):
        """An empty record still produces a row and no placeholder text"""
        result = build_credentials_pdf_result([{}], 'Test Org', generated_at=GENERATED_AT)

        self.assertEqual(result.row_count, 1)
        text = _page_texts(result.pdf_bytes)[0]
        self.assertNotIn('None', text)
        self.assertNotIn('null', text)
        self.assertNotIn('undefined', text)

        # Row number drawn between the column header and the instructions
        table = text[text.index('Year') + len('Year'):text.index('Instructions:')]
        self.assertEqual(table.split(), ['1'])

    def test_very_long_value_is_clipped(self):
        started = time.monotonic()
        result = build_credentials_pdf_result(
            [{'name': 'x' * 100000, 'rollNumber': 'CS001'}], 'Test Org', generated_at=GENERATED_AT
        )

        self.assertLess(time.monotonic() - started, 10)
        self.assertEqual(result.page_count, 1)
        text = _page_texts(result.pdf_bytes)[0]
        self.assertIn('xxx...', text)
        self.assertNotIn('x' * 1000, text)
        self.assertIn('CS001', text)

    def test_accepts_credential_records(self):
        records = [CredentialRecord(name='Jane Doe', roll_number='CS001', password='CS001@CN')]

        result = build_credentials_pdf_result(records, 'Test Org', generated_at=GENERATED_AT)
        self.assertIn('Jane Doe', _page_texts(result.pdf_bytes)[0])

    def test_long_values_are_truncated(self):
        long_email = 'a.very.long.email.address.for.testing@university.example.com'
        result = build_credentials_pdf_result(
            [{'name': 'Jane Doe', 'email': long_email}], 'Test Org', generated_at=GENERATED_AT
        )
        text = _page_texts(result.pdf_bytes)[0]

        self.assertNotIn(long_email, text)
        self.assertIn('a.very.long', text)
        self.assertIn('...', text)

    def test_same_input_same_content(self):
        """Two renders with identical input carry identical text on every page"""
        credentials = _students(60)

        first = build_credentials_pdf_result(credentials, 'Test Org', generated_at=GENERATED_AT)
        second = build_credentials_pdf_result(credentials, 'Test Org', generated_at=GENERATED_AT)

        self.assertEqual(_page_texts(first.pdf_bytes), _page_texts(second.pdf_bytes))
        self.assertEqual(first.page_count, second.page_count)
        self.assertEqual(first.row_count, second.row_count)

    def test_pagination_repeats_column_header(self):
        """Rows that overflow the first page continue after a repeated header row"""
        result = build_credentials_pdf_result(_students(60), 'Test Org', generated_at=GENERATED_AT)

        self.assertEqual(result.row_count, 60)
        self.assertGreater(result.page_count, 1)

        texts = _page_texts(result.pdf_bytes)
        self.assertEqual(len(texts), result.page_count)
        self.assertIn('Student 1', texts[0])
        self.assertNotIn('Student 60', texts[0])
        self.assertIn('Student 60', texts[-1])

        # Banner only on the first page
        self.assertIn(CONFIDENTIAL_NOTICE, texts[0])
        self.assertNotIn(CONFIDENTIAL_NOTICE, texts[1])

        second_page = texts[1]
        self.assertIn('Roll No.', second_page)
        self.assertIn('Password', second_page)
        self.assertLess(second_page.index('Roll No.'), second_page.index('Student 47'))

    def test_first_page_capacity(self):
        """46 rows fit under the header block on the first page"""
        result = build_credentials_pdf_result(_students(47), 'Test Org', generated_at=GENERATED_AT)
        texts = _page_texts(result.pdf_bytes)

        self.assertEqual(result.page_count, 2)
        self.assertIn('Student 46', texts[0])
        self.assertNotIn('Student 47', texts[0])
        self.assertIn('Student 47', texts[1])

    def test_instructions_move_to_new_page_when_space_runs_out(self):
        result = build_credentials_pdf_result(_students(46), 'Test Org', generated_at=GENERATED_AT)
        texts = _page_texts(result.pdf_bytes)

        self.assertEqual(result.page_count, 2)
        self.assertEqual(result.row_count, 46)
        self.assertNotIn('Instructions:', texts[0])
        self.assertIn('Instructions:', texts[1])
        self.assertNotIn('Roll No.', texts[1])

    def test_instructions_stay_on_page_when_space_remains(self):
        result = build_credentials_pdf_result(_students(40), 'Test Org', generated_at=GENERATED_AT)

        self.assertEqual(result.page_count, 1)
        self.assertIn('Instructions:', _page_texts(result.pdf_bytes)[0])
