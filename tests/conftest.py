from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import resume_layout.data.db as app_db
from resume_layout.data.models import Base


@pytest.fixture
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Spin up a throw-away SQLite database."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(app_db, "_engine", engine)
    monkeypatch.setattr(app_db, "_SessionLocal", sessionmaker(bind=engine, expire_on_commit=False))
    yield
    engine.dispose()


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Use a temporary SQLite DB for API tests."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.dispose_db()
    app_db.init_db()
    yield
    app_db.dispose_db()


@pytest.fixture
def full_record() -> dict:
    """A record exercising every section and optional field."""
    return {
        "profile": {
            "full_name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "location": "Vancouver, BC",
            "linkedin": "linkedin.com/in/janedoe",
            "github": "github.com/janedoe",
            "website": "janedoe.dev",
            "summary": "Backend engineer focused on data pipelines and reliable APIs.",
            "skills": ["Python", "FastAPI", "PostgreSQL", "Docker"],
        },
        "experience": [
            {
                "company": "Acme Corp",
                "position": "Software Engineer",
                "start_date": "2021-06",
                "is_current": True,
                "description": "Built the ingestion service.",
                "achievements": ["Cut latency by 30%", "Led migration to Kubernetes"],
            },
            {
                "company": "Globex",
                "position": "Intern",
                "start_date": "2020-05",
                "end_date": "2020-08",
            },
        ],
        "education": [
            {
                "institution": "State University",
                "degree": "B.S.",
                "field": "Computer Science",
                "start_date": "2016",
                "end_date": "2020",
                "gpa": "3.8",
                "description": "Dean's List.",
            }
        ],
        "projects": [
            {
                "name": "Resume Builder",
                "description": "Paginated PDF export for resumes.",
                "technologies": ["Python", "fpdf2"],
                "github_url": "github.com/janedoe/resume",
                "live_url": "resume.janedoe.dev",
            }
        ],
    }


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically add api_db fixture to tests in API test files."""
    for item in items:
        test_file_path = Path(str(item.fspath))
        if "api" in test_file_path.stem.lower():
            item.add_marker(pytest.mark.usefixtures("api_db"))
