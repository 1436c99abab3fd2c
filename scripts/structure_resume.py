"""
Structure a plain-text resume and print the result as JSON

Usage:
    python scripts/structure_resume.py resume.txt
    cat resume.txt | python scripts/structure_resume.py
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import structlog

from resume_engine.core.logging_config import configure_logging
from resume_engine.resumes.parser import parse_resume_content

logger = structlog.get_logger()


def structure_file(path: str = None) -> int:
    """Read resume text from ``path`` (or stdin) and print the structured resume"""
    if path:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            logger.error("resume_read_failed", path=path, error=str(e))
            print(f"❌ Could not read {path}: {e}", file=sys.stderr)
            return 1
    else:
        text = sys.stdin.read()

    document = parse_resume_content(text)
    print(document.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    # stdout is reserved for the JSON document
    configure_logging(stream=sys.stderr)
    sys.exit(structure_file(sys.argv[1] if len(sys.argv) > 1 else None))
