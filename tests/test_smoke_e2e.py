import functools
import http.server
import os
import socketserver
import threading
from collections.abc import Iterator
from pathlib import Path

import pytest

from browser_session.core.session import Session

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(os.environ.get("BS_E2E") != "1", reason="set BS_E2E=1 to run browser tests"),
]


@pytest.fixture(scope="session")
def web_server() -> Iterator[str]:
    root = Path(__file__).resolve().parent / "fixtures"
    Handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(root))
    httpd = socketserver.TCPServer(("127.0.0.1", 0), Handler)
    port = httpd.server_address[1]
    t = threading.Thread(target=httpd.serve_forever, daemon=True)
    t.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        httpd.shutdown()
        httpd.server_close()


def test_smoke_end_to_end(web_server: str, tmp_path: Path) -> None:
    from browser_session.io.playwright_driver import PlaywrightDriver

    cv = tmp_path / "cv.pdf"
    cv.write_bytes(b"%PDF-1.4")

    with Session(PlaywrightDriver(headless=True)) as session:
        session.visit(f"{web_server}/form.html")
        page = session.page
        page.fill_field("Email", "hello")
        page.check_field("Remember me")
        page.select_field_option("country", "Japan")
        page.attach_file_to_field("resume", str(cv))
        page.click_button("Save")

        assert page.get_text_by_xpath("//p[@id='result']") == "hello"
        assert len(session.find_all("xpath", ".//option")) == 2
        assert page.find_link("Home") is not None
