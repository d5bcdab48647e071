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

"""Find TomDoc'd declarations in shell scripts and collect them."""

import collections
import enum


class DeclarationKind(enum.Enum):
    """What kind of thing a TomDoc block documents.

    The values are used in the rendered titles, e.g. ``# function `foo```.
    """

    FUNCTION = 'function'
    EXPORT = 'export'
    VARIABLE = 'variable'
    CONSTANT = 'constant'
    UNKNOWN = 'unknown'


Declaration = collections.namedtuple('Declaration', 'name kind doc')


_classifiers = []


def classifier(func):
    r"""Add a function that recognizes a declaration line.

    This is supposed to be used as a decorator. For example, like this:

    ```python
    @classifier
    def classify_alias(line):
        match = re.match(r'alias\s+([A-Za-z_]+)=', line)
        if match is None:
            return None     # not recognized
        return match.group(1), DeclarationKind.FUNCTION
    ```

    The function is called with one line that has no leading or trailing
    whitespace, and it should return a `(name, kind)` pair or None.
    Classifiers are tried in the order they were added and the first one
    that returns something wins, so the defaults from
    [defaults](defaults.md) always come first.
    """
    _classifiers.append(func)
    return func


def classify(line):
    """Return a `(name, kind)` pair for a line that follows a TomDoc block.

    Lines that no classifier recognizes are `DeclarationKind.UNKNOWN`, and
    the whole line is used as the name.
    """
    for func in _classifiers:
        result = func(line)
        if result is not None:
            return result
    return line, DeclarationKind.UNKNOWN


def _is_comment(line):
    return line == '#' or line.startswith('# ')


def scan_lines(lines):
    """Yield a [Declaration](#declaration) for each TomDoc'd line.

    Consecutive comment lines are collected to a TomDoc block, and the
    first non-comment line after the block ends it. If that line is not
    blank it gets classified, but the block is thrown away in any case.
    """
    doc = ''
    for line in lines:
        # surrounding blanks never matter
        line = line.strip(' \t\n')
        if _is_comment(line):
            doc += line + '\n'
            continue
        if line and doc:
            name, kind = classify(line)
            yield Declaration(name, kind, doc)
        doc = ''


class Section:
    """A group of rendered entries with a title.

    Section objects have these attributes:

    - *title:* The title of this section, without the `#` character.
    - *entries:* A list of rendered entries as strings.
    """

    def __init__(self, title):
        self.title = title
        self.entries = []

    def __repr__(self):
        if len(self.entries) == 1:
            entries = "1 entry"
        else:
            entries = "%d entries" % len(self.entries)
        return "<%s %r, %s>" % (type(self).__name__, self.title, entries)

    def dump(self, stream):
        """Write the section to *stream*, or nothing if it's empty."""
        if not self.entries:
            return
        print('#', self.title, file=stream)
        for entry in self.entries:
            print(entry.rstrip('\n'), file=stream)
        print(file=stream)


# the order of the groups in the reports
_GROUPS = [
    (DeclarationKind.FUNCTION, "Functions"),
    (DeclarationKind.VARIABLE, "Variables"),
    (DeclarationKind.CONSTANT, "Constants"),
    (DeclarationKind.EXPORT, "Exports"),
]


class Report:
    """The documentation of one shell script.

    Reports have these attributes:

    - *filename:* The name of the file as given on the command line.
    - *subs:* A list of [Section](#section) objects, one for each
      declaration kind except `DeclarationKind.UNKNOWN`.
    """

    def __init__(self, filename):
        self.filename = filename
        self.subs = []
        self._groups = {}
        for kind, title in _GROUPS:
            section = Section(title)
            self.subs.append(section)
            self._groups[kind] = section

    def __repr__(self):
        return "<%s %r>" % (type(self).__name__, self.filename)

    def add(self, kind, entry):
        """Append a rendered entry to the section of *kind*."""
        self._groups[kind].entries.append(entry)

    def is_empty(self):
        return not any(sub.entries for sub in self.subs)

    def dump(self, stream):
        """Write the report to *stream*.

        Nothing is written if the report is empty. Runs of blank lines are
        not squeezed here.
        """
        if self.is_empty():
            return
        print('#', self.filename, file=stream)
        for sub in self.subs:
            sub.dump(stream)


def parse_lines(lines, filename):
    """Create a [Report](#report) from the lines of a shell script."""
    # render imports this module, so this can't be a global import
    from tomdocsh import render

    report = Report(filename)
    for declaration in scan_lines(lines):
        if not declaration.name:
            continue
        entry = render.render_entry(*declaration)
        if entry.strip():
            report.add(declaration.kind, entry)
    return report


def parse_file(path):
    """Read a shell script and create a [Report](#report) of it.

    Unreadable files raise OSError.
    """
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return parse_lines(f, path)
