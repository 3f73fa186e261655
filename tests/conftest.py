import json
from pathlib import Path

import pytest


TYPES_DATA = {
    "jquery": {
        "3.3": {"libraryName": "jQuery", "libraryMajorVersion": 3, "libraryMinorVersion": 3},
        "3.5": {"libraryName": "jQuery", "libraryMajorVersion": 3, "libraryMinorVersion": 5},
        "2.0": {"libraryName": "jQuery", "libraryMajorVersion": 2, "libraryMinorVersion": 0},
    },
    "node": {
        "14.0": {"libraryName": "Node.js", "libraryMajorVersion": 14, "libraryMinorVersion": 0},
    },
}

NOT_NEEDED_PACKAGES = {
    "packages": [
        {
            "libraryName": "Moment",
            "typingsPackageName": "moment",
            "sourceRepoURL": "https://github.com/moment/moment",
            "asOfVersion": "2.10.5",
        },
        {
            "libraryName": "axios",
            "typingsPackageName": "axios",
            "sourceRepoURL": "https://github.com/axios/axios",
            "asOfVersion": "0.14.0",
        },
    ]
}


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "typesData.json").write_text(json.dumps(TYPES_DATA), encoding="utf-8")
    (tmp_path / "notNeededPackages.json").write_text(json.dumps(NOT_NEEDED_PACKAGES), encoding="utf-8")
    return tmp_path


@pytest.fixture
def write_versions(data_dir: Path):
    def write(versions: dict) -> Path:
        versions_file = data_dir / "versions.json"
        versions_file.write_text(json.dumps(versions), encoding="utf-8")
        return versions_file
    return write
