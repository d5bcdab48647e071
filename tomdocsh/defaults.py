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

"""Default declaration classifiers.

TomDocSh loads this module automatically when it's imported and this
module exports no public functions, so importing this module yourself is
usually pointless. You may still want to read this module to see what
kind of lines tomdocsh recognizes by default.

The classifiers are added in priority order: functions, exports,
variables and then constants.
"""

import re

from tomdocsh.parse import DeclarationKind, classifier


__all__ = []


# Shells allow nearly every character in function names. These are not
# allowed anywhere: tab, space, " $ & ' ( ) ; < > \ ` | and the SOH and
# DEL control characters. The first character can't be # or - either,
# and other characters can't be = or [.
_FUNC_NAME = (r"[^-\x01\t \"#$&'();<>\\`|\x7f]"
              r"[^\x01\t \"$&'();<=>\[\\`|\x7f]*")

# variables are far more restrictive
_VAR_NAME = r'[A-Za-z_][A-Za-z0-9_]*'

_KEYWORD_FUNCTION_RE = re.compile(
    r'\s*function\s+(?P<name>%s)\s*\(\)' % _FUNC_NAME)
_PLAIN_FUNCTION_RE = re.compile(r'\s*(?P<name>%s)\s*\(\)' % _FUNC_NAME)
_EXPORT_RE = re.compile(r'\s*export\s+(?P<name>%s)' % _VAR_NAME)
_DEFAULT_VALUE_RE = re.compile(r'\s*:\s+\$\{(?P<name>%s):?=' % _VAR_NAME)
_DECLARE_RE = re.compile(
    r'\s*(?:declare|typeset)\s+(?:-[a-zA-Z]*\s+)?(?P<name>%s)' % _VAR_NAME)
_READONLY_RE = re.compile(
    r'\s*readonly\s+(?:-[a-zA-Z]*\s+)?(?P<name>%s)' % _VAR_NAME)


def _match_name(regex, line, kind):
    match = regex.match(line)
    if match is None:
        return None
    return match.group('name'), kind


@classifier
def classify_keyword_function(line):
    return _match_name(_KEYWORD_FUNCTION_RE, line, DeclarationKind.FUNCTION)


@classifier
def classify_plain_function(line):
    return _match_name(_PLAIN_FUNCTION_RE, line, DeclarationKind.FUNCTION)


@classifier
def classify_export(line):
    return _match_name(_EXPORT_RE, line, DeclarationKind.EXPORT)


@classifier
def classify_default_value(line):
    """Recognize the `: ${NAME:=value}` idiom."""
    return _match_name(_DEFAULT_VALUE_RE, line, DeclarationKind.VARIABLE)


@classifier
def classify_declare(line):
    return _match_name(_DECLARE_RE, line, DeclarationKind.VARIABLE)


@classifier
def classify_readonly(line):
    return _match_name(_READONLY_RE, line, DeclarationKind.CONSTANT)
