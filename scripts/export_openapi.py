import json
import sys
import os

# Ensure project root is in path
sys.path.append(os.getcwd())

from tv_api.main import create_app


def export(path: str = "openapi.json", settings=None):
    """Write the OpenAPI document generated from the channel schemas."""
    app = create_app(settings)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(app.openapi(), fh, indent=2, ensure_ascii=False)
        fh.write("\n")
    print(f"📄 OpenAPI written to {path}")


if __name__ == "__main__":
    export(sys.argv[1] if len(sys.argv) > 1 else "openapi.json")
