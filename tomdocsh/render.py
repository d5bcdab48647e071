# Copyright (c) 2017 Akuli

# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:

# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Turn TomDoc blocks into Markdown.

TomDoc is loosely structured text, so the rendering is done one line at
a time. Each line is classified as one of these, in this order:

- An option line like `$1 - The name`. These become list items, and
  indented lines after them are joined to the same item.
- An empty line. It ends the current paragraph or list.
- An indented example line. These are written as is, but with two more
  spaces so Markdown shows them as code.
- A `* ` list item or a ```` ``` ```` code fence line, written as is.
- Paragraph text. Consecutive lines are joined to one paragraph.
"""

import collections
import re

from tomdocsh.parse import DeclarationKind


__all__ = ['FormatState', 'format_line', 'format_body', 'render_entry']


# Lines containing this are for ShellCheck, not for people.
SUPPRESSION_MARKER = '# shellcheck'

_ACCESS_RE = re.compile(r'# (?:(Internal|Public):?)+ (.*)\Z', re.DOTALL)
_UNCOMMENT_RE = re.compile(r'^\s*#\s?')
_OPTION_RE = re.compile(r'\s*\S+\s+-\s')


FormatState = collections.namedtuple(
    'FormatState', 'last_line pending_newline in_option_list')

# pending_newline is True when the output doesn't end with a blank line
# separator yet
INITIAL_STATE = FormatState(
    last_line='', pending_newline=True, in_option_list=False)


def _uncomment(line):
    return _UNCOMMENT_RE.sub('', line, count=1).rstrip()


def format_line(state, line):
    """Format one uncommented line.

    This returns a `(text, new_state)` tuple where *state* and
    *new_state* are [FormatState](#formatstate) objects.
    """
    new_state = state._replace(last_line=line)

    if _OPTION_RE.match(line) is not None:
        text = '\n' if state.pending_newline else ''
        if line[0].isspace():
            text += '    * ' + line.lstrip()
        else:
            text += '* ' + line
        # no newline yet, the next line may continue this item
        return text, new_state._replace(
            pending_newline=True, in_option_list=True)

    if not line:
        text = '\n\n' if state.pending_newline else '\n'
        return text, new_state._replace(
            pending_newline=False, in_option_list=False)

    if line.startswith('  '):
        if state.in_option_list:
            return ' ' + line.lstrip(' '), new_state._replace(
                pending_newline=True)
        return '  ' + line + '\n', new_state._replace(pending_newline=False)

    if line.startswith('* ') or line.startswith('```'):
        return line + '\n', new_state._replace(pending_newline=False)

    if state.last_line:
        text = ' ' + line + '\n'
    else:
        text = line + '\n'
    return text, new_state._replace(
        pending_newline=True, in_option_list=False)


def format_body(lines):
    """Format uncommented TomDoc lines to Markdown."""
    state = INITIAL_STATE
    parts = []
    for line in lines:
        text, state = format_line(state, line)
        parts.append(text)
    if state.pending_newline:
        parts.append('\n')
    return ''.join(parts)


def render_entry(name, kind, doc):
    """Render the documentation of one declaration.

    The *doc* is the TomDoc block as a string of comment lines, including
    the `#` characters. An empty string is returned if the declaration
    should not be documented at all.
    """
    if kind is DeclarationKind.UNKNOWN:
        return ''

    lines = [line for line in doc.split('\n')
             if SUPPRESSION_MARKER not in line]
    doc = '\n'.join(lines).rstrip('\n')
    if not doc:
        return ''

    parts = ['# %s `%s`\n' % (kind.value, name)]

    match = _ACCESS_RE.match(doc)
    if match is not None:
        access, doc = match.group(1), '# ' + match.group(2)
        parts.append('> ***%s***\n\n' % access)

    parts.append(format_body(map(_uncomment, doc.split('\n'))))
    return ''.join(parts)
