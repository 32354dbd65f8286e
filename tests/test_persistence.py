from design_kata import logging_config
from design_kata.models.journal import Journal
from design_kata.persistence import SAVE_COMPLETED_MESSAGE, Persistence


def test_save_reports_success_without_writing(tmp_path, capsys):
    journal = Journal()
    journal.add_entry("first")
    target = tmp_path / "nested" / "journal.txt"

    Persistence().save_to_file(journal, str(target), False)

    assert capsys.readouterr().out == f"{SAVE_COMPLETED_MESSAGE}\n"
    assert not target.exists()
    assert not target.parent.exists()


def test_save_ignores_overwrite_and_existing_file(tmp_path, capsys):
    target = tmp_path / "journal.txt"
    target.write_text("original", encoding="utf-8")
    journal = Journal()
    journal.add_entry("new")

    Persistence().save_to_file(journal, str(target), overwrite=True)

    assert target.read_text(encoding="utf-8") == "original"
    assert capsys.readouterr().out.strip() == "Save is completed"


def test_save_writes_audit_entry(isolated_logging, capsys):
    logging_config.setup_logging(console_level="ERROR")
    journal = Journal()
    journal.add_entry("first")

    Persistence().save_to_file(journal, "adfaf/fasdf", False)

    audit_file = isolated_logging / "design-kata-audit.log"
    content = audit_file.read_text(encoding="utf-8")
    assert "Journal save requested" in content
    assert "filename=adfaf/fasdf" in content
    assert "overwrite=False" in content
    assert "entries=1" in content


