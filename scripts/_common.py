from pathlib import Path

RES_DIR = Path(__file__).parent.parent / "res"
