import builtins

import cli


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


def test_cli_echoes_user_lines(monkeypatch, capsys):
    _feed(monkeypatch, ["Hola", "  ", "/exit"])
    cli.main()

    out = capsys.readouterr().out
    assert "Assistant: Echo: Hola" in out
    assert out.rstrip().endswith("Bye!")


def test_cli_history_and_new_session(monkeypatch, capsys):
    _feed(monkeypatch, ["hi", "/history", "/new", "/history"])
    cli.main()

    out = capsys.readouterr().out
    assert "user: hi" in out
    assert "assistant: Echo: hi" in out
    assert "New session_id:" in out
    assert "(empty)" in out
    assert out.rstrip().endswith("Bye!")


def test_cli_session_command_prints_current_id(monkeypatch, capsys):
    monkeypatch.setattr(cli.uuid, "uuid4", lambda: "fixed-session")
    _feed(monkeypatch, ["/session", "/exit"])
    cli.main()

    out = capsys.readouterr().out
    assert out.count("session_id: fixed-session") == 2


def test_cli_keyboard_interrupt_says_bye(monkeypatch, capsys):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupted)
    cli.main()

    assert capsys.readouterr().out.rstrip().endswith("Bye!")
