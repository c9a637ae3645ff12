from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from log_defer import Session
from log_defer.integrations.fastapi import DeferredLogMiddleware, get_log
from log_defer.sinks import MemorySink


def build_app(sink: MemorySink) -> FastAPI:
    app = FastAPI()
    app.add_middleware(DeferredLogMiddleware, callback=sink, level="debug")

    @app.get("/items/{item_id}")
    async def read_item(item_id: int, log: Session = Depends(get_log)):
        log.debug("looking up", item_id)
        with log.timer("lookup"):
            log.data()["item_id"] = item_id
        return {"item_id": item_id}

    return app


def test_one_record_per_request():
    sink = MemorySink()
    client = TestClient(build_app(sink))

    response = client.get("/items/5")
    assert response.status_code == 200
    client.get("/items/6")

    assert len(sink) == 2
    record = sink.records[0]
    assert record["data"] == {"method": "GET", "path": "/items/5", "item_id": 5, "status": 200}
    assert record["logs"][0][1:] == [40, "looking up", 5]
    assert set(record["timers"]) == {"request", "lookup"}
    request_start, request_end = record["timers"]["request"]
    lookup_start, lookup_end = record["timers"]["lookup"]
    assert request_start <= lookup_start <= lookup_end <= request_end <= record["end"]


def test_missing_middleware_returns_server_error():
    app = FastAPI()

    @app.get("/")
    async def root(log: Session = Depends(get_log)):
        return {}

    response = TestClient(app).get("/")
    assert response.status_code == 500
