"""
scripts/import_terms.py 테스트 (파일 가져오기 / 내보내기)
"""

from scripts.import_terms import main
from app.services.term_service import TermService


class TestImportTermsScript:

    def test_import_file(self, db_session, tmp_path):
        source = tmp_path / "terms.tsv"
        source.write_text(
            "middle power\tミドルパワー\ttheory\n"
            "swing state, スイング・ステート\n"
            "deterrence, 抑止\n"
            "malformed line\n",
            encoding="utf-8"
        )

        assert main(["import_terms.py", str(source)]) == 0

        terms = TermService(db_session).list_terms()
        assert sorted(t.en for t in terms) == ["middle power", "swing state"]
        assert {t.added_by for t in terms} == {"import-script"}

    def test_import_missing_file(self, db_session, tmp_path):
        assert main(["import_terms.py", str(tmp_path / "missing.tsv")]) == 1

    def test_import_without_records(self, db_session, tmp_path):
        source = tmp_path / "empty.tsv"
        source.write_text("\nonly english\n", encoding="utf-8")

        assert main(["import_terms.py", str(source)]) == 1

    def test_export_file(self, db_session, tmp_path):
        TermService(db_session).add_term(
            {"en": "middle power", "ja": "ミドルパワー", "category": "theory"},
            username="tanaka"
        )
        target = tmp_path / "out.csv"

        assert main(["import_terms.py", "--export", str(target)]) == 0

        assert target.read_text(encoding="utf-8") == "middle power, ミドルパワー, theory, , \n"

    def test_export_without_terms(self, db_session, tmp_path):
        assert main(["import_terms.py", "--export", str(tmp_path / "out.csv")]) == 1

    def test_usage(self, capsys):
        assert main(["import_terms.py"]) == 2
        assert "Usage" in capsys.readouterr().out
