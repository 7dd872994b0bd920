import json
from pathlib import Path

import pytest

from yapi_struct.document import Api

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def export_bytes() -> bytes:
    return (FIXTURES / "yapi_export.json").read_bytes()


@pytest.fixture
def expected_go() -> str:
    return (FIXTURES / "yapi_export.go").read_text(encoding="utf-8")


def make_api(path="/user", req=None, res=None, method="POST", title="Create user") -> Api:
    """Build an Api whose bodies are the given schema dicts."""
    return Api(
        method=method,
        path=path,
        title=title,
        req_body_other=json.dumps(req) if req is not None else "",
        res_body=json.dumps(res) if res is not None else "",
    )
