from script.backfill_badges import backfill, main


def test_dry_run_writes_nothing(session_factory, add_completions, badge_names):
    add_completions("user-a", 5)
    add_completions("user-b", 1)

    result = backfill(session_factory, dry_run=True)

    assert result == {"user-a": ["Beginner", "Pilgrim"], "user-b": ["Beginner"]}
    assert badge_names("user-a") == []


def test_backfill_awards_every_user(session_factory, add_completions, badge_names):
    add_completions("user-a", 20)
    add_completions("user-b", 1)

    assert backfill(session_factory) == {
        "user-a": ["Beginner", "Pilgrim", "Intercessor"],
        "user-b": ["Beginner"],
    }
    assert backfill(session_factory) == {"user-a": [], "user-b": []}
    assert badge_names("user-b") == ["Beginner"]


def test_main_prints_summary(monkeypatch, session_factory, add_completions, capsys):
    add_completions("user-a", 1)
    monkeypatch.setattr("script.backfill_badges.SessionLocal", session_factory)

    main([])

    out = capsys.readouterr().out
    assert "user-a: Beginner" in out
    assert "Checked 1 users, awarded 1 badges." in out
