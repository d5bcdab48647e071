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

"""The command-line interface.

Invoking this module like `python3 -m tomdocsh.cmdline` does nothing,
but `python3 -m tomdocsh` runs this module.
"""

import argparse
import io
import sys

import tomdocsh


__all__ = ['main', 'squeeze_blank_lines']


_desc = "Parse TomDoc'd shell scripts and generate pretty documentation."


class _ArgumentParser(argparse.ArgumentParser):

    # invalid options are a usage error with status 1, not 2
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, "error: %s\n" % message)


def squeeze_blank_lines(text):
    """Replace runs of empty lines with a single empty line.

    This does the same thing as `cat -s`.
    """
    result = []
    previous_blank = False
    for line in text.splitlines(keepends=True):
        blank = (line == '\n')
        if not (blank and previous_blank):
            result.append(line)
        previous_blank = blank
    return ''.join(result)


def _read_report(path):
    if path == '-':
        # decoded like parse_file() decodes files
        stdin = io.TextIOWrapper(
            sys.stdin.buffer, encoding='utf-8', errors='replace')
        return tomdocsh.parse_lines(stdin, path)
    return tomdocsh.parse_file(path)


def main(argv=None):
    """Run the command-line interface.

    This uses `sys.argv` if *argv* is not given, and may use `sys.exit`.
    """
    parser = _ArgumentParser(prog='tomdocsh', description=_desc)
    parser.add_argument(
        '--version', action='version',
        version="%(prog)s version " + tomdocsh.__version__)
    parser.add_argument(
        'files', nargs='*', metavar='shell-script',
        help="files to document, '-' means standard input")
    args = parser.parse_args(argv)

    for path in args.files:
        try:
            report = _read_report(path)
        except OSError as e:
            # one unreadable file stops the whole run
            print("error: cannot read '%s': %s"
                  % (path, e.strerror or e), file=sys.stderr)
            sys.exit(1)

        buffer = io.StringIO()
        report.dump(buffer)
        sys.stdout.write(squeeze_blank_lines(buffer.getvalue()))
