import http.server
import json
import os
import threading
from dataclasses import dataclass

import pytest

from flow.asset.server import (
    AssetError,
    Filesystem,
    Handle,
    Loader,
    Server,
    get_extension,
)


@dataclass
class MyAsset:
    health: int


@dataclass
class MyAsset2:
    health_asset: Handle


class CustomAssetLoader(Loader):
    def extensions(self):
        return [".1.json"]

    def load(self, server, data):
        return MyAsset(json.loads(data)["Health"])

    def store(self, server, value):
        return json.dumps({"Health": value.health}).encode()


class CustomAssetLoader2(Loader):
    def extensions(self):
        return [".2.json"]

    def load(self, server, data):
        asset_map = json.loads(data)
        return MyAsset2(server.load(asset_map["Health"]))

    def store(self, server, value):
        return json.dumps({"Health": value.health_asset.name}).encode()


@pytest.fixture
def server(tmp_path):
    srv = Server()
    srv.register_filesystem("assets/", Filesystem(str(tmp_path)))
    srv.register(CustomAssetLoader())
    srv.register(CustomAssetLoader2())
    return srv


def write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("test.1.json", ".1.json"),
        ("dir.x/file.png", ".png"),
        ("a/b.c/d", ""),
        (".hidden", ""),
        ("a/.hidden", ".hidden"),
        ("noext", ""),
    ],
)
def test_get_extension(name, expected):
    assert get_extension(name) == expected


def test_handle_set_and_get():
    handle = Handle("x")
    assert handle.done is False
    handle.set(5)
    assert handle.generation == 1
    assert handle.done is True
    handle._finish()
    assert handle.get() == 5


def test_handle_wait_times_out():
    assert Handle("x").wait(0.01) is False


def test_basic_load(server, tmp_path):
    write(tmp_path / "test.1.json", '{"Health": 10}')
    write(tmp_path / "test2.1.json", '{"Health": 20}')
    h1 = server.load("assets/test.1.json")
    h2 = server.load("assets/test2.1.json")
    assert h1.get() == MyAsset(10)
    assert h2.get() == MyAsset(20)
    assert h1.generation == 1


def test_load_returns_same_handle(server, tmp_path):
    write(tmp_path / "test.1.json", '{"Health": 1}')
    first = server.load("assets/test.1.json")
    second = server.load("assets/test.1.json")
    assert second is first
    assert second.name == "assets/test.1.json"
    assert second.get() == MyAsset(1)
    assert second.generation == 1


def test_nested_load(server, tmp_path):
    write(tmp_path / "test.1.json", '{"Health": 42}')
    write(tmp_path / "test.2.json", '{"Health": "assets/test.1.json"}')
    outer = server.load("assets/test.2.json").get()
    assert outer.health_asset.get() == MyAsset(42)


def test_missing_file_records_error(server):
    handle = server.load("assets/missing.1.json")
    with pytest.raises(FileNotFoundError):
        handle.get()
    assert handle.done is True


def test_loader_error_recorded(server, tmp_path):
    write(tmp_path / "bad.1.json", "not json")
    with pytest.raises(json.JSONDecodeError):
        server.load("assets/bad.1.json").get()


def test_unknown_prefix_error(server):
    with pytest.raises(AssetError):
        server.load("other/test.1.json").get()


def test_missing_loader(server):
    with pytest.raises(AssetError, match="could not find loader"):
        server.load("assets/image.png")


def test_duplicate_loader(server):
    with pytest.raises(AssetError, match="duplicate"):
        server.register(CustomAssetLoader())


def test_duplicate_prefix(server, tmp_path):
    with pytest.raises(AssetError):
        server.register_filesystem("assets/", Filesystem(str(tmp_path)))


def test_register_sets_prefix(tmp_path):
    fs = Filesystem(str(tmp_path))
    Server().register_filesystem("p/", fs)
    assert fs.prefix == "p/"


def test_read_and_write_raw(server, tmp_path):
    server.write_raw("assets/sub/dir/file.bin", b"\x00\x01")
    assert (tmp_path / "sub" / "dir" / "file.bin").read_bytes() == b"\x00\x01"
    raw = server.read_raw("assets/sub/dir/file.bin")
    assert raw.data == b"\x00\x01"
    assert raw.mod_time == os.stat(tmp_path / "sub" / "dir" / "file.bin").st_mtime_ns


def test_write_raw_unknown_prefix(server):
    with pytest.raises(AssetError):
        server.write_raw("nope/file.bin", b"")


def test_load_dir(server, tmp_path):
    write(tmp_path / "dir" / "a.1.json", '{"Health": 1}')
    write(tmp_path / "dir" / "b.1.json", '{"Health": 2}')
    write(tmp_path / "dir" / "sub" / "c.1.json", '{"Health": 3}')
    flat = server.load_dir("assets/dir")
    assert [h.name for h in flat] == ["assets/dir/a.1.json", "assets/dir/b.1.json"]
    assert [h.get().health for h in flat] == [1, 2]
    deep = server.load_dir("assets/dir", recursive=True)
    assert [h.get().health for h in deep] == [1, 2, 3]
    assert deep[0] is flat[0]


def test_load_dir_missing(server):
    assert server.load_dir("assets/nothing") == []
    assert server.load_dir("unknown/dir") == []


def test_store_writes_back(server, tmp_path):
    write(tmp_path / "s.1.json", '{"Health": 3}')
    handle = server.load("assets/s.1.json")
    assert handle.get() == MyAsset(3)
    handle.set(MyAsset(99))
    server.store(handle)
    raw = server.read_raw("assets/s.1.json")
    assert json.loads(raw.data) == {"Health": 99}
    assert json.loads((tmp_path / "s.1.json").read_text()) == {"Health": 99}


def test_store_without_value(server):
    handle = server.load("assets/gone.1.json")
    with pytest.raises(AssetError):
        server.store(handle)


def test_reload_changed_file(server, tmp_path):
    path = tmp_path / "r.1.json"
    write(path, '{"Health": 1}')
    handle = server.load("assets/r.1.json")
    assert handle.get() == MyAsset(1)
    path.write_text('{"Health": 2}')
    stat = os.stat(path)
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))
    thread = server.reload(handle)
    thread.join()
    assert handle.get() == MyAsset(2)
    assert handle.generation == 2


def test_reload_unchanged_file(server, tmp_path):
    write(tmp_path / "u.1.json", '{"Health": 1}')
    handle = server.load("assets/u.1.json")
    handle.get()
    server.reload(handle).join()
    assert handle.generation == 1


def test_reload_while_loading_does_nothing(server):
    handle = Handle("assets/x.1.json")
    assert server.reload(handle) is None


class _Handler(http.server.BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            body = b"hello"
            self.send_response(200)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)
        else:
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def http_base():
    httpd = http.server.ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def test_read_raw_http(http_base):
    raw = Server().read_raw(f"{http_base}/ok")
    assert raw.data == b"hello"
    assert raw.mod_time is None


def test_read_raw_http_error(http_base):
    with pytest.raises(AssetError, match="404"):
        Server().read_raw(f"{http_base}/missing")