import collections

import pytest

import treelox

Result = collections.namedtuple("Result", "out err lox")


@pytest.fixture
def run(capsys):
    def run(source, interactive=False):
        lox = treelox.Lox(interactive=interactive)
        lox.run(source)
        out, err = capsys.readouterr()
        return Result(out, err, lox)
    return run


@pytest.fixture
def scan(capsys):
    def scan(source):
        lox = treelox.Lox()
        tokens = treelox.Scanner(source, lox).scan_tokens()
        return tokens, capsys.readouterr().err
    return scan


@pytest.fixture
def parse(capsys):
    def parse(source):
        lox = treelox.Lox()
        tokens = treelox.Scanner(source, lox).scan_tokens()
        statements = treelox.Parser(tokens, lox).parse()
        return statements, capsys.readouterr().err
    return parse
