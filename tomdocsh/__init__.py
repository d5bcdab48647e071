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

'''Generate Markdown documentation from TomDoc'd shell scripts.

This module provides a handy command-line interface, and usually you
should use that. You can also import this module and use it that way if
you need to do something that can't be done with the command-line
interface.

Example usage:

```
$ cat hello.sh
# Public: Print a greeting.
#
# $1 - Name of the person to greet.
#
# Returns nothing.
hello() {
    echo "Hello $1!"
}
$ python3 -m tomdocsh hello.sh
# hello.sh
# Functions
# function `hello`
> ***Public***

Print a greeting.

* $1 - Name of the person to greet.

Returns nothing.

$
```
'''

__version__ = '0.2'

from tomdocsh.parse import (
    DeclarationKind, Declaration, Section, Report,
    classifier, classify, scan_lines, parse_lines, parse_file)
from tomdocsh.render import render_entry
from tomdocsh import defaults  # noqa

__all__ = [
    'defaults', 'cmdline', 'parse', 'render',      # submodules
    'DeclarationKind', 'Declaration',               # data types
    'Section', 'Report',                            # classes
    'classifier',                                   # hook decorators
    'classify', 'scan_lines', 'parse_lines',        # misc functions
    'parse_file', 'render_entry',
]
