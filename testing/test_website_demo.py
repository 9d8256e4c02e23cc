import zipfile

import website_demo


def test_demo_writes_outputs(monkeypatch, tmp_path):
    monkeypatch.delenv("STATE_PATH", raising=False)
    out = tmp_path / "build"

    code = website_demo.main(["--provider", "mock", "--out", str(out), "landing page"])

    assert code == 0
    assert "Mock LLM Output" in (out / "preview.html").read_text()
    assert 'sandbox="allow-scripts"' in (out / "sandbox.html").read_text()

    names = zipfile.ZipFile(out / "project.zip").namelist()
    assert sorted(names) == ["index.html", "script.js", "styles.css"]
