# -*- coding: utf-8 -*-

##########################################
#     This file forms part of LISTEDITOR
#     Copyright: refer to COPYRIGHT.txt
#     License: refer to LICENSE.txt
##########################################

"""
Small presentation helpers used by the list editor templates
"""

import re
from html import escape

_url_re = re.compile(r'\b((?:https?://|www\.)[^\s<]+[^\s<.,;:!?)\'"])')
_email_re = re.compile(r'\b([\w.+-]+@[\w-]+(?:\.[\w-]+)+)\b')


def content_tag(name, content='', attrs=None):
    attr_str = ''
    for (k, v) in sorted((attrs or {}).items()):
        attr_str += ' %s="%s"' % (k, escape(str(v), quote=True))
    return '<%s%s>%s</%s>' % (name, attr_str, content, name)


def auto_link(text, target='_blank'):
    """
    Turns URLs and e-mail addresses in an (already escaped) text into links
    """

    def link_url(match):
        url = match.group(1)
        href = url
        if url.startswith('www.'):
            href = 'http://' + url
        return '<a href="%s" target="%s">%s</a>' % (href, target, url)

    def link_email(match):
        address = match.group(1)
        return '<a href="mailto:%s">%s</a>' % (address, address)

    text = _url_re.sub(link_url, text)
    # e-mails inside the links we've just created are left alone
    parts = re.split(r'(<a [^>]*>.*?</a>)', text)
    for (i, part) in enumerate(parts):
        if not part.startswith('<a '):
            parts[i] = _email_re.sub(link_email, part)
    return ''.join(parts)


def entry_display(entry, display_property):
    """
    The label of a list entry: the value of `display_property`
    (called if it's a method), escaped and auto-linked
    """
    value = getattr(entry, display_property)
    if callable(value):
        value = value()
    return auto_link(escape(str(value)))


def busy_icon(display=False, el_id='busy', src='list_editor/indicator.gif'):
    style = 'height: 16px; width: 16px;'
    if not display:
        style += ' display: none;'
    return '<img alt="" id="%s" src="%s" style="%s" />' % (escape(el_id, quote=True), escape(src, quote=True), style)


def better_simple_format(text):
    # Windows-style newlines only, that's what browsers submit
    result = escape(text).replace('\r\n', '<br/>')
    return '<p>' + result + '</p>'


def build_container_start(title=None, ui_class='pm_display_table'):
    return '<table class="%s" cellpadding="0" cellspacing="0">' % escape(ui_class, quote=True)


def close_container():
    return '</table>'


def required_icon():
    return '<span class="required_label">*</span>'


def build_id(name):
    return name.replace(' ', '') + '_view'


def build_tooltip(name, tooltip):
    return content_tag('span', '?', {'class': 'tooltip', 'id': build_id(name) + '_tt', 'title': tooltip})


def build_name_value_row(name, value, required_image=None, tooltip=None, wrap=False, row_id=None, display=True):
    """
    A table row with a label and a value. `value` is markup and is
    not escaped; `tooltip` is a text displayed when hovering the question mark
    """
    name = escape(name)
    id = build_id(name)
    if required_image is None:
        required_image = ''
    if tooltip:
        tt = ' ' + build_tooltip(name, tooltip)
    else:
        tt = ''

    if row_id:
        row_params = {'id': row_id}
        if not display:  # display flag will only ever be used in conjunction with id
            row_params['style'] = 'display: none;'
    else:
        row_params = {}
    label_params = {'class': 'label', 'nowrap': 'nowrap'}
    value_params = {'class': 'value', 'id': id}
    if not wrap:
        value_params['nowrap'] = 'nowrap'

    return content_tag('tr',
        content_tag('td', required_image + content_tag('label', name, {'for': id}) + ':', label_params) +
        content_tag('td', value + tt, value_params), row_params)


def build_name_value(name, value, required=True, tooltip=None, wrap=False, row_id=None, display=True):
    required_image = None
    if required:
        required_image = required_icon()
    return build_name_value_row(name, value, required_image, tooltip, wrap, row_id, display)
