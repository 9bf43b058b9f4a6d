from excal.assembler import Assembler
from excal.cli import help_message, main


def test_no_arguments_prints_help(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == help_message()


def test_help_flag(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert out == help_message()
    assert out.startswith("Excal: Usage")


def test_version_flag(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out == "Excal: Version 0.01 ALPHA\n"


def test_assembles_positional_file(tmp_path):
    source = "push %BYTE:3\n"
    path = tmp_path / "prog.xas"
    path.write_text(source)
    assert main([str(path)]) == 0
    assert (tmp_path / "prog.xbt").read_bytes() == Assembler(source).compile()


def test_assembles_input_option(tmp_path):
    path = tmp_path / "other.xas"
    path.write_text("push %DWORD:1\n")
    assert main(["-i", str(path)]) == 0
    assert (tmp_path / "other.xbt").exists()


def test_bad_extension_reports_error(capsys):
    assert main(["notes.txt"]) == 1
    out = capsys.readouterr().out
    assert "ERR_FILE_UNKNOWN_TYPE [1]" in out
    assert "Unsupported file type '.txt'" in out


def test_missing_option_value(capsys):
    assert main(["-o"]) == 1
    assert "Missing argument." in capsys.readouterr().out