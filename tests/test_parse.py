"""Tests for finding TomDoc blocks and building reports."""

import io

from tomdocsh import Declaration, DeclarationKind, parse_file, parse_lines
from tomdocsh import scan_lines


def dump(report):
    stream = io.StringIO()
    report.dump(stream)
    return stream.getvalue()


def test_function_with_doc():
    lines = ['# Returns true.', 'foo() {', '  echo hi', '}']
    assert list(scan_lines(lines)) == [
        Declaration('foo', DeclarationKind.FUNCTION, '# Returns true.\n')]


def test_multiline_block():
    lines = ['# First.\n', '#\n', '# Second.\n', 'export FOO=1\n']
    assert list(scan_lines(lines)) == [
        Declaration('FOO', DeclarationKind.EXPORT, '# First.\n#\n# Second.\n')]


def test_no_doc_no_declaration():
    assert list(scan_lines(['foo() {', '}', 'readonly X=1'])) == []


def test_blank_line_discards_block():
    assert list(scan_lines(['# doc', '', 'foo() {'])) == []
    assert list(scan_lines(['# doc', '   \t', 'foo() {'])) == []


def test_block_is_used_only_once():
    lines = ['# doc', 'foo() {', 'bar() {']
    assert [decl.name for decl in scan_lines(lines)] == ['foo']


def test_indented_comments_and_declarations():
    lines = ['    # doc', '    readonly X=1']
    assert list(scan_lines(lines)) == [
        Declaration('X', DeclarationKind.CONSTANT, '# doc\n')]


def test_things_that_are_not_comments():
    assert list(scan_lines(['#!/bin/bash', 'foo() {'])) == []
    assert list(scan_lines(['#no space', 'foo() {'])) == []


def test_unknown_declaration():
    assert list(scan_lines(['# doc', 'echo hi'])) == [
        Declaration('echo hi', DeclarationKind.UNKNOWN, '# doc\n')]


def test_empty_report():
    report = parse_lines(['#!/bin/bash', 'echo hi'], 'test.sh')
    assert report.is_empty()
    assert dump(report) == ''


def test_unknown_declarations_are_skipped():
    report = parse_lines(['# Say hi.', 'echo hi'], 'test.sh')
    assert report.is_empty()


def test_suppressed_doc():
    lines = ['# shellcheck disable=SC2034', 'declare FOO=1']
    assert parse_lines(lines, 'test.sh').is_empty()


def test_group_order():
    lines = [
        '# A constant.', 'readonly A=1',
        '# An export.', 'export B=2',
        '# A function.', 'c() {', '}',
        '# A variable.', 'declare D',
    ]
    assert dump(parse_lines(lines, 'test.sh')) == (
        '# test.sh\n'
        '# Functions\n'
        '# function `c`\n'
        'A function.\n'
        '\n'
        '# Variables\n'
        '# variable `D`\n'
        'A variable.\n'
        '\n'
        '# Constants\n'
        '# constant `A`\n'
        'A constant.\n'
        '\n'
        '# Exports\n'
        '# export `B`\n'
        'An export.\n'
        '\n'
    )


def test_entries_keep_their_order():
    lines = ['# One.', 'one() {', '# Two.', 'two() {', '# Three.', 'three() {']
    report = parse_lines(lines, 'test.sh')
    functions = report.subs[0]
    assert functions.title == "Functions"
    assert [entry.splitlines()[0] for entry in functions.entries] == [
        '# function `one`', '# function `two`', '# function `three`']


def test_empty_groups_are_omitted():
    output = dump(parse_lines(['# The name.', ': ${NAME:=x}'], 'test.sh'))
    assert output == '# test.sh\n# Variables\n# variable `NAME`\nThe name.\n\n'


def test_same_output_twice():
    lines = ['# Public: Do it.', '#', '# $1 - The thing', 'doit() {']
    assert dump(parse_lines(lines, 'a.sh')) == dump(parse_lines(lines, 'a.sh'))


def test_parse_file(tmp_path):
    path = tmp_path / 'test.sh'
    path.write_text('#!/bin/bash\n\n# Internal: helper.\nbar() {\n:\n}\n')
    output = dump(parse_file(str(path)))
    assert output == (
        '# %s\n# Functions\n# function `bar`\n> ***Internal***\n\n'
        'helper.\n\n' % path)
