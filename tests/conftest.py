import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

if "hikaru" in sys.modules:
    for name in list(sys.modules):
        if name == "hikaru" or name.startswith("hikaru."):
            del sys.modules[name]
