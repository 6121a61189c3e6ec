from scripts.calculate_tax import main


def test_prints_summary(capsys):
    code = main(["--income", "5000000", "--type", "individual", "--state", "default"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Annual Income Tax: ₦690,000.00" in out
    assert "Monthly PAYE Estimate: ₦57,500.00" in out
    assert "Net Pay" in out


def test_company_summary_has_no_net_pay(capsys):
    assert main(["--income", "10000000", "--type", "large_company"]) == 0
    out = capsys.readouterr().out
    assert "₦3,400,000.00" in out
    assert "Net Pay" not in out


def test_pidgin_output(capsys):
    assert main(["--income", "5000000", "--lang", "pg"]) == 0
    assert "Total Tax for Year" in capsys.readouterr().out


def test_invalid_income_exit_code(capsys):
    assert main(["--income", "abc"]) == 2
    err = capsys.readouterr().err
    assert "Please enter a valid positive number" in err
    assert "TAX300" in err


def test_writes_exports(tmp_path):
    csv_path = tmp_path / "history.csv"
    pdf_path = tmp_path / "summary.pdf"
    code = main(["--income", "1000000", "--state", "lagos", "--csv", str(csv_path), "--pdf", str(pdf_path)])
    assert code == 0
    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Date,State,Type")
    assert lines[1].endswith("900000.00")
    assert pdf_path.read_bytes().startswith(b"%PDF")
