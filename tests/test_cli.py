import io
import logging

import pytest

import treelox


@pytest.fixture
def script(tmp_path):
    def script(source):
        path = tmp_path / "script.lox"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return script


def test_runs_script(script, capsys):
    assert treelox.main([script('print "hello";')]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_static_error_exit_code(script, capsys):
    assert treelox.main([script("print ;")]) == 65
    assert capsys.readouterr().err == "[line 1] Error at ';': Expect expression.\n"


def test_runtime_error_exit_code(script, capsys):
    assert treelox.main([script('"x" + 1;')]) == 70
    assert capsys.readouterr().err == "Operands must be two numbers or two strings.\n[line 1]\n"


def test_too_many_arguments(capsys):
    assert treelox.main(["a.lox", "b.lox"]) == 64
    out, err = capsys.readouterr()
    assert out.startswith("usage: treelox")
    assert err == ""


def test_script_is_read_as_utf8(script, capsys):
    assert treelox.main([script('print "héllo";')]) == 0
    assert capsys.readouterr().out == "héllo\n"


def test_print_ast(script, capsys):
    assert treelox.main(["--print-ast", script("var a = 1 + 2; print a;")]) == 0
    assert capsys.readouterr().out == "(var a (+ 1.0 2.0))\n(print a)\n"


def test_print_ast_skips_resolution(script, capsys):
    assert treelox.main(["--print-ast", script("return 1;")]) == 0
    assert capsys.readouterr().out == "(return 1.0)\n"


def test_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(
        "var a = 1;\n\nprint a + ;\nprint a;\nvar a = 3;\nprint a;\nprint nil + 1;\nprint \"still here\";\n"))
    assert treelox.main([]) == 0
    out, err = capsys.readouterr()
    assert out == "> > > > 1\n> > 3\n> > still here\n> \n"
    assert err == ("[line 1] Error at ';': Expect expression.\n"
                   "Operands must be two numbers or two strings.\n[line 1]\n")


def test_verbose_logs_stages(script, caplog, capsys, monkeypatch):
    configured = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: configured.append(kwargs))
    with caplog.at_level(logging.DEBUG, logger="treelox"):
        assert treelox.main(["-v", script("print 1;")]) == 0
    assert configured[0]["level"] == logging.DEBUG
    messages = [record.getMessage() for record in caplog.records]
    assert "scanned 4 tokens" in messages
    assert "parsed 1 statements" in messages
    assert "resolved 0 local references" in messages


def test_skipped_evaluation_is_logged(script, caplog):
    with caplog.at_level(logging.DEBUG, logger="treelox"):
        assert treelox.main([script("{ var a = a; }")]) == 65
    assert "static errors reported, skipping evaluation" in [
        record.getMessage() for record in caplog.records]


def test_deep_recursion_through_cli(script, capsys):
    source = "fun f(n) { if (n == 0) return 0; return f(n - 1) + 1; } print f(1500);"
    assert treelox.main([script(source)]) == 0
    assert capsys.readouterr().out == "1500\n"


def test_missing_script(tmp_path, capsys):
    path = tmp_path / "missing.lox"
    assert treelox.main([str(path)]) == 66
    assert capsys.readouterr().err == f"Could not read {path}: No such file or directory.\n"


def test_script_that_is_not_utf8(tmp_path, capsys):
    path = tmp_path / "latin1.lox"
    path.write_bytes(b'print "\xe9";')
    assert treelox.main([str(path)]) == 66
    assert capsys.readouterr().err == f"Could not read {path}: not valid UTF-8.\n"


def test_resolved_count_is_per_run(caplog, capsys):
    lox = treelox.Lox(interactive=True)
    with caplog.at_level(logging.DEBUG, logger="treelox"):
        lox.run("{ var a = 1; print a; }")
        lox.run("{ var b = 2; print b; }")
    counts = [record.getMessage() for record in caplog.records
              if record.getMessage().startswith("resolved")]
    assert counts == ["resolved 1 local references", "resolved 1 local references"]
