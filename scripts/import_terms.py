"""
커스텀 용어 일괄 가져오기 / 내보내기

Usage:
    python scripts/import_terms.py terms.tsv            # import
    python scripts/import_terms.py --export out.csv     # export

Input format (one term per line, tab- or comma-delimited):
    en, ja, category?, note?, reference?

Lines with fewer than two fields are skipped. Terms whose English phrase is
already in the dictionary (built-in or custom) are skipped.
"""
import sys
from pathlib import Path
import logging

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import settings
from app.core.term_io import parse_bulk_text
from app.database import SessionLocal, init_db
from app.services.term_service import TermService

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SCRIPT_USER = "import-script"


def import_file(path: Path) -> int:
    if not path.exists():
        logger.error(f"File not found: {path}")
        return 1

    records = parse_bulk_text(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded {len(records)} records from {path}")
    if not records:
        logger.warning("No valid records to import!")
        return 1

    db = SessionLocal()
    try:
        result = TermService(db).bulk_import(records, username=SCRIPT_USER)
    finally:
        db.close()

    logger.info("=" * 60)
    logger.info("✅ Import completed!")
    logger.info(f"   Imported: {result['imported']}")
    logger.info(f"   Skipped:  {result['skipped']}")
    logger.info(f"   Total custom terms: {result['total']}")
    logger.info("=" * 60)
    return 0


def export_file(path: Path) -> int:
    db = SessionLocal()
    try:
        content = TermService(db).export_csv()
    finally:
        db.close()

    if not content:
        logger.warning("No custom terms to export")
        return 1

    path.write_text(content + "\n", encoding="utf-8")
    logger.info(f"✅ Exported {len(content.splitlines())} terms to {path}")
    return 0


def main(argv) -> int:
    """메인 실행 함수"""
    if len(argv) == 2:
        mode, target = "import", argv[1]
    elif len(argv) == 3 and argv[1] == "--export":
        mode, target = "export", argv[2]
    else:
        print(__doc__)
        return 2

    logger.info(f"Database: {settings.DATABASE_URL}")
    init_db()

    if mode == "export":
        return export_file(Path(target))
    return import_file(Path(target))


if __name__ == "__main__":
    sys.exit(main(sys.argv))
