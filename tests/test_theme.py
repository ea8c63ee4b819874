import theme


def test_read_env_file_filters_keys_and_values(tmp_path):
    env = tmp_path / ".env"
    env.write_text(
        "# palette\nTODO_DONE=00ff00\nTODO_ERROR = #FF0000\nTODO_PENDING=notahex\nOTHER=#123456\nbroken line\n",
        encoding="utf-8",
    )
    assert theme.read_env_file(env) == {"TODO_DONE": "#00ff00", "TODO_ERROR": "#FF0000"}


def test_read_env_file_missing(tmp_path):
    assert theme.read_env_file(tmp_path / ".env") == {}


def test_resolve_hex_priority(monkeypatch):
    overrides = {"TODO_DONE": "#111111"}
    monkeypatch.delenv("TODO_DONE", raising=False)
    assert theme.resolve_hex("TODO_DONE", "#000000", overrides) == "#111111"
    assert theme.resolve_hex("TODO_PRIMARY", "#000000", overrides) == "#000000"
    monkeypatch.setenv("TODO_DONE", "222222")
    assert theme.resolve_hex("TODO_DONE", "#000000", overrides) == "#222222"


def test_color_is_plain_when_disabled(monkeypatch):
    monkeypatch.setattr(theme, "_ENABLE", False)
    assert theme.color("text", theme.BOLD) == "text"
