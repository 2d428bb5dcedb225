import logging

import pytest
from alembic import command
from sqlalchemy import inspect

from blog_data.core.logging import configure_logging, correlation_id_var
from blog_data.db import Settings, create_db_engine, create_session_factory, session_scope
from blog_data.db.models import Page
from blog_data.db.run_migrations import build_config, main
from blog_data.repositories import PageRepository


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValueError):
        Settings(_env_file=None).database_url


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///blog.db")
    monkeypatch.setenv("SQL_ECHO", "true")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///blog.db"
    assert settings.SQL_ECHO is True


def test_migrations_create_schema_usable_by_repositories(tmp_path):
    url = f"sqlite:///{tmp_path / 'blog.db'}"
    command.upgrade(build_config(url), "head")

    engine = create_db_engine(Settings(DATABASE_URL=url, _env_file=None))
    try:
        insp = inspect(engine)
        assert {"pages", "posts", "tags", "post_tags", "users", "comments"} <= set(insp.get_table_names())
        uniques = {u["name"]: u["column_names"] for u in insp.get_unique_constraints("post_tags")}
        assert uniques["uk_post_tag"] == ["post_id", "tag_id"]

        with session_scope(create_session_factory(engine)) as session:
            page = PageRepository(session).insert(Page(title="About", body="", is_published=True))
            assert PageRepository(session).get_by_id(str(page.id)).title == "About"
    finally:
        engine.dispose()

    command.downgrade(build_config(url), "base")
    engine = create_db_engine(Settings(DATABASE_URL=url, _env_file=None))
    try:
        assert "posts" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_run_migrations_rejects_unknown_command(monkeypatch, restore_root_logging):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    with pytest.raises(SystemExit) as exc:
        main(["explode"])
    assert exc.value.code == 2


def test_configure_logging_injects_correlation_id(capsys, restore_root_logging):
    configure_logging("debug")
    token = correlation_id_var.set("req-1")
    try:
        logging.getLogger("blog_data.test").info("hello")
    finally:
        correlation_id_var.reset(token)

    out = capsys.readouterr().out
    assert "cid=req-1" in out and "| INFO | blog_data.test |" in out
