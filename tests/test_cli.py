import json

import pytest

from payment_kata import cli
from payment_kata.config import Settings
from payment_kata.services.factory import ServiceFactory


@pytest.fixture()
def log_path(tmp_path):
    path = tmp_path / "payment_logs.txt"
    ServiceFactory.configure(Settings(log_file_path=str(path)))
    return path


def test_pay_success(log_path, capsys):
    code = cli.main(
        ["pay", "--type", "paypal", "--amount", "50", "--email", "a@example.com", "--detail", "paypal_email=a@paypal.com"]
    )
    result = json.loads(capsys.readouterr().out)
    assert code == 0
    assert result["status"] == "SUCCESS"
    assert result["transaction_id"].startswith("PP-")
    assert "SUCCESS: PayPal payment of 50.0 USD for a@example.com" in log_path.read_text()


def test_pay_declined(log_path, capsys):
    code = cli.main(
        ["pay", "--type", "paypal", "--amount", "50", "--email", "a@example.com", "--detail", "paypal_email=x", "--decline"]
    )
    assert code == 1
    assert json.loads(capsys.readouterr().out)["status"] == "FAILED"


def test_pay_validation_error(log_path, capsys):
    code = cli.main(["pay", "--type", "paypal", "--amount", "-1", "--email", "a@example.com"])
    assert code == cli.EXIT_INVALID
    assert "Invalid amount" in capsys.readouterr().err


def test_pay_rejects_malformed_detail(log_path):
    with pytest.raises(SystemExit):
        cli.main(["pay", "--type", "paypal", "--amount", "5", "--email", "a@example.com", "--detail", "oops"])


def test_pay_legacy(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    code = cli.main(["pay", "--legacy", "--type", "bitcoin", "--amount", "5", "--email", "a@example.com"])
    assert code == 0
    assert "Error: Unsupported payment type" in capsys.readouterr().out


def test_quote(log_path, capsys):
    assert cli.main(["quote", "--amount", "100", "--tier", "gold"]) == 0
    out = capsys.readouterr().out
    assert "fee: 3.20" in out
    assert "discounted (gold): 95.00" in out


def test_demo(log_path, capsys):
    assert cli.main(["demo"]) == 0
    assert capsys.readouterr().out.count('"status": "SUCCESS"') == 2
    assert len(ServiceFactory.get_store()) == 2


def test_rubric_score(capsys):
    assert cli.main(["rubric", "--score", "abstraction=20", "--score", "dispatch=15"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["total"] == 35
    assert result["band"] == "no hire"


def test_rubric_listing(capsys):
    assert cli.main(["rubric"]) == 0
    assert "abstraction" in capsys.readouterr().out


def test_pay_rejects_nan_amount(log_path, capsys):
    code = cli.main(["pay", "--type", "paypal", "--amount", "nan", "--email", "a@example.com", "--detail", "paypal_email=x"])
    assert code == cli.EXIT_INVALID
    assert "Invalid amount nan" in capsys.readouterr().err
    assert len(ServiceFactory.get_store()) == 0
