import pytest

from simplechain import cli


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "DIFFICULTY", 4)
    return tmp_path


def _run(capsys, *argv):
    code = cli.main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_no_arguments_prints_usage(capsys):
    code, out, _ = _run(capsys)
    assert code == 0
    assert out.startswith("Usage:")
    assert "createWallet - Creates a new wallet" in out


def test_unknown_command_prints_usage(capsys):
    code, out, _ = _run(capsys, "bogus")
    assert code == 0
    assert "printChain - Print the blocks in the chain" in out


def test_create_and_get_balance(capsys):
    code, out, _ = _run(capsys, "createBlockchain", "-address", "alice")
    assert code == 0
    assert "Genesis created" in out
    assert "Finished Creating chain" in out
    _, out, _ = _run(capsys, "getBalance", "-address", "alice")
    assert "Balance of alice: 100" in out


def test_create_twice_reports_existing(capsys):
    _run(capsys, "createBlockchain", "-address", "alice")
    code, out, _ = _run(capsys, "createBlockchain", "-address", "alice")
    assert code == 0
    assert "Blockchain already exists" in out


def test_get_balance_without_chain(capsys):
    code, out, _ = _run(capsys, "getBalance", "-address", "alice")
    assert code == 0
    assert "No blockchain found, please create one first" in out


def test_get_balance_without_address_prints_help(capsys):
    code, out, err = _run(capsys, "getBalance")
    assert code == 0
    assert "-address" in err
    assert "Balance" not in out


def test_send_moves_funds(capsys):
    _run(capsys, "createBlockchain", "-address", "alice")
    code, out, _ = _run(capsys, "send", "-from", "alice", "-to", "bob", "-amount", "30")
    assert code == 0
    assert "Transaction send 30 from alice to bob success" in out
    _, out, _ = _run(capsys, "getBalance", "-address", "bob")
    assert "Balance of bob: 30" in out
    _, out, _ = _run(capsys, "getBalance", "-address", "alice")
    assert "Balance of alice: 70" in out


def test_send_too_much_fails(capsys):
    _run(capsys, "createBlockchain", "-address", "alice")
    code, _, err = _run(capsys, "send", "-from", "alice", "-to", "bob", "-amount", "500")
    assert code == 1
    assert "Not enough funds" in err


def test_send_zero_amount_prints_help(capsys):
    _run(capsys, "createBlockchain", "-address", "alice")
    code, out, err = _run(capsys, "send", "-from", "alice", "-to", "bob", "-amount", "0")
    assert code == 0
    assert "-amount" in err
    assert "Transaction send" not in out


def test_bad_amount_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["send", "-from", "alice", "-to", "bob", "-amount", "many"])
    assert excinfo.value.code == 2


def test_print_chain_validates(capsys):
    _run(capsys, "createBlockchain", "-address", "alice")
    _run(capsys, "send", "-from", "alice", "-to", "bob", "-amount", "10")
    code, out, _ = _run(capsys, "printChain")
    assert code == 0
    assert out.count("Pow: true") == 2
    assert "Pow: false" not in out


def test_create_wallet_then_list(capsys, workdir):
    code, out, _ = _run(capsys, "createWallet")
    assert code == 0
    line = next(l for l in out.splitlines() if l.startswith("New address is "))
    address = line[len("New address is "):]
    assert (workdir / "tmp" / "wallets.data").exists()
    _, out, _ = _run(capsys, "listAddress")
    assert out.split() == [address]


def test_list_address_empty(capsys):
    code, out, _ = _run(capsys, "listAddress")
    assert code == 0
    assert out == ""