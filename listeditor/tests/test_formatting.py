# -*- coding: utf-8 -*-

import unittest

from listeditor import formatting

from listeditor.tests import DummyObject


class FormattingTests(unittest.TestCase):

    def test_entry_display_property(self):
        entry = DummyObject(1, name='<b>Bob</b>')
        self.assertEqual(formatting.entry_display(entry, 'name'), '&lt;b&gt;Bob&lt;/b&gt;')

    def test_entry_display_method(self):

        class Named(object):
            def __str__(self):
                return 'Alice'

        self.assertEqual(formatting.entry_display(Named(), '__str__'), 'Alice')

    def test_auto_link(self):
        result = formatting.auto_link('see http://example.com/a, or mail bob@example.com')
        self.assertEqual(result,
            'see <a href="http://example.com/a" target="_blank">http://example.com/a</a>, '
            'or mail <a href="mailto:bob@example.com">bob@example.com</a>')

    def test_auto_link_www(self):
        result = formatting.auto_link('www.example.com')
        self.assertEqual(result, '<a href="http://www.example.com" target="_blank">www.example.com</a>')

    def test_busy_icon(self):
        self.assertTrue('display: none;' in formatting.busy_icon())
        self.assertFalse('display: none;' in formatting.busy_icon(display=True))
        self.assertTrue('id="spinner"' in formatting.busy_icon(el_id='spinner'))

    def test_better_simple_format(self):
        self.assertEqual(formatting.better_simple_format('one\r\ntwo & three'),
                         '<p>one<br/>two &amp; three</p>')

    def test_build_id(self):
        self.assertEqual(formatting.build_id('First name'), 'Firstname_view')

    def test_name_value_row(self):
        row = formatting.build_name_value('First name', 'Bob')
        self.assertEqual(row,
            '<tr><td class="label" nowrap="nowrap"><span class="required_label">*</span>'
            '<label for="Firstname_view">First name</label>:</td>'
            '<td class="value" id="Firstname_view" nowrap="nowrap">Bob</td></tr>')

    def test_name_value_row_hidden(self):
        row = formatting.build_name_value_row('Age', '42', row_id='age_row', display=False, wrap=True)
        self.assertTrue(row.startswith('<tr id="age_row" style="display: none;">'))
        self.assertFalse('nowrap="nowrap">42' in row)

    def test_container(self):
        self.assertEqual(formatting.build_container_start(),
                         '<table class="pm_display_table" cellpadding="0" cellspacing="0">')
        self.assertEqual(formatting.close_container(), '</table>')
