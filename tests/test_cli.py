import json

from brand_dna import cli
from brand_dna.config import DeploymentMode
from brand_dna.errors import NavigationTimeout
from brand_dna.models import BrandAssets, BrandReport, FontReport, PageMetadata


def sample_report(url: str) -> BrandReport:
    return BrandReport(
        url=url,
        meta=PageMetadata(title="Acme | Home", brand="Acme"),
        assets=BrandAssets(logo=None, screenshot="data:image/jpeg;base64,AAAA", images=[], favicons=[]),
        colors=["#000000", "#ffffff", "#333333", "#666666"],
        fonts=FontReport(body="Inter", heading=None),
    )


def test_cli_writes_report(monkeypatch, tmp_path):
    seen = {}

    async def fake_run(url, on_progress, config):
        seen["config"] = config
        on_progress("Navigating to website...", 10)
        return sample_report(url)

    monkeypatch.setattr(cli, "run", fake_run)
    output = tmp_path / "report.json"
    code = cli.main(
        ["https://acme.test", "--output", str(output), "--mode", "serverless", "--no-screenshot-data"]
    )

    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["meta"] == {"title": "Acme | Home", "brand": "Acme"}
    assert data["assets"]["screenshot"] is None
    assert seen["config"].mode is DeploymentMode.SERVERLESS


def test_cli_reports_failure(monkeypatch, capsys):
    async def failing_run(url, on_progress, config):
        raise NavigationTimeout(url, "Page did not load within 30s")

    monkeypatch.setattr(cli, "run", failing_run)
    assert cli.main(["https://slow.test"]) == 1
    assert capsys.readouterr().out == ""
