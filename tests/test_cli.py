import pytest

from solong.cli import error_message, has_map_extension, main


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.ber", True),
        (".ber", True),
        ("level.bert", False),
        ("level.txt", False),
        ("ber", False),
        ("", False),
    ],
)
def test_has_map_extension(path, expected):
    assert has_map_extension(path) is expected


def test_error_message_output(capsys):
    error_message("Mapa Inválido.\n")
    out = capsys.readouterr().out
    assert out == "\033[0;31mErro!\n\033[0mMapa Inválido.\n"


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "Argumentos Inválidos." in capsys.readouterr().out


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "Argumentos Inválidos." in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    out = capsys.readouterr().out
    assert "Erro!" in out
    assert "Mapa Inválido." in out


def test_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("111\n1P1\n111\n")
    assert main([str(path)]) == 1
    assert "Mapa Inválido." in capsys.readouterr().out


def test_wrong_extension(tmp_path, capsys):
    path = tmp_path / "good.txt"
    path.write_text("11111\n1PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert "Mapa Inválido." in capsys.readouterr().out


def test_enemy_rejected_without_bonus(tmp_path, capsys):
    path = tmp_path / "enemy.ber"
    path.write_text("111111\n1PCEK1\n111111\n")
    assert main([str(path)]) == 1
    assert "Mapa Inválido." in capsys.readouterr().out


def test_bonus_flag_does_not_count_as_map(capsys):
    assert main(["--bonus"]) == 1
    assert "Argumentos Inválidos." in capsys.readouterr().out