import pytest

from sctoolkit.scconf import Config, parse_config

SAMPLE = (
    "# settings used by the service\n"
    "$heoo = \"Hello World\"\n"
    "; not an entry\n"
    "$ bad = \"skipped\"\n"
    "$yexu = \"Ye\\\"xu\"\n"
    "$end=\"END\"\n"
)


def test_sample_entries():
    entries = parse_config(SAMPLE)
    assert entries == {"heoo": "Hello World", "yexu": 'Ye\\"xu', "end": "END"}


def test_space_after_dollar_is_skipped():
    assert "bad" not in parse_config(SAMPLE)


def test_first_duplicate_wins():
    assert parse_config('$k="one"\n$k="two"\n') == {"k": "one"}


def test_whitespace_removed_from_key():
    assert parse_config('$my key = "v"\n') == {"mykey": "v"}


def test_prefix_before_quote_joins_value():
    assert parse_config('$k = pre "fix"\n') == {"k": "prefix"}


def test_missing_equals_runs_into_next_line():
    assert parse_config('$a\n$b="x"\n') == {"a$b": "x"}


def test_unterminated_value_stops_parsing():
    assert parse_config('$a="1"\n$b="open\n$c="3"\n') == {"a": "1", "b": 'open\n$c='}


def test_no_equals_at_end_stops():
    assert parse_config('$a="1"\n$tail') == {"a": "1"}


def test_trailing_text_after_value_ignored():
    assert parse_config('$a="1" trailing words\n$b="2"') == {"a": "1", "b": "2"}


def test_keys_are_case_sensitive():
    entries = parse_config('$Name="x"\n')
    assert entries.get("Name") == "x"
    assert entries.get("name") is None


def test_config_from_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    config = Config(path).start()
    assert config.get("heoo") == "Hello World"
    assert config.get("heoo2") is None
    assert config.get("yexu") == 'Ye\\"xu'
    assert config.get("end") == "END"


def test_empty_key_returns_none(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text('$="empty key"\n', encoding="utf-8")
    config = Config(path).start()
    assert config.get("") is None
    assert config.get(None) is None


def test_restart_reloads(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text('$a="1"\n', encoding="utf-8")
    config = Config(path).start()
    assert config.get("a") == "1"
    path.write_text('$b="2"\n', encoding="utf-8")
    config.start()
    assert config.get("a") is None
    assert config.get("b") == "2"


def test_missing_file_raises_and_keeps_values(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text('$a="1"\n', encoding="utf-8")
    config = Config(path).start()
    path.unlink()
    with pytest.raises(FileNotFoundError):
        config.start()
    assert config.get("a") == "1"


def test_crlf_lines(tmp_path):
    path = tmp_path / "config.ini"
    path.write_bytes(b'$a = "1"\r\n$b = "2"\r\n')
    config = Config(path).start()
    assert config.get("a") == "1"
    assert config.get("b") == "2"