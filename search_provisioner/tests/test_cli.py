from unittest.mock import patch

import provision_search


def test_runs_all_pipelines_and_pauses(config, fake_client, capsys):
    with patch.object(provision_search, "load_config", return_value=config), \
         patch.object(provision_search.SearchAdminClient, "from_config", return_value=fake_client), \
         patch("builtins.input", return_value="") as pause:
        rc = provision_search.main([])

    assert rc == 0
    pause.assert_called_once()
    assert sorted(fake_client.indexes) == ["sql-blob-index", "sql-customers", "storage-users"]
    out = capsys.readouterr().out
    assert "Creating SQL Index" in out
    assert "Running Azure blob and sql indexers..." in out


def test_no_pause(config, fake_client):
    with patch.object(provision_search, "load_config", return_value=config), \
         patch.object(provision_search.SearchAdminClient, "from_config", return_value=fake_client), \
         patch("builtins.input") as pause:
        assert provision_search.main(["--no-pause"]) == 0
    pause.assert_not_called()


def test_missing_config_exits_1(capsys):
    with patch.object(provision_search, "load_config", side_effect=EnvironmentError("Missing required config: AI_SEARCH_NAME")):
        assert provision_search.main(["--no-pause"]) == 1
    assert "AI_SEARCH_NAME" in capsys.readouterr().out
