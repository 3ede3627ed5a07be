import pytest

from rosterapp.schemas.player import Player
from rosterapp.views.document import Document, Region, RenderError
from rosterapp.views.render import (
    EMPTY_MESSAGE,
    render_all_players,
    render_main_page_heading,
    render_new_player_form,
    render_single_player,
    reset_new_player_form,
)
from tests.helpers.players import FIDO, REX


def _players(*raw):
    return [Player.model_validate({"id": i, **r}) for i, r in enumerate(raw, start=1)]


@pytest.fixture
def document() -> Document:
    return Document.host()


class TestListView:
    def test_one_card_per_player_with_id_and_name(self, document):
        players = _players(FIDO, REX)
        assert render_all_players(document, players) is True

        main = document.query("main").inner_html()
        assert main.count('class="player_card"') == 2
        assert "<h3>Fido</h3>" in main and "Player Id: 1" in main
        assert "<h3>Rex</h3>" in main and "Player Id: 2" in main
        assert 'alt="Fido"' in main
        assert 'value="details:1"' in main and 'value="remove:2"' in main
        assert EMPTY_MESSAGE not in main

    def test_cards_follow_the_given_order(self, document):
        fido, rex = _players(FIDO, REX)
        render_all_players(document, [rex, fido])
        main = document.query("main").inner_html()
        assert main.index("Rex") < main.index("Fido")

    def test_empty_collection_shows_message_and_no_cards(self, document):
        render_all_players(document, [])
        main = document.query("main").inner_html()
        assert "Current Players" in main
        assert EMPTY_MESSAGE in main
        assert "player_card" not in main

    def test_rendering_twice_gives_identical_markup(self, document):
        players = _players(FIDO, REX)
        render_all_players(document, players)
        first = document.query("main").children
        render_all_players(document, players)
        assert document.query("main").children == first
        assert document.query("main").inner_html().count('class="player_card"') == 2

    def test_replaces_previous_content(self, document):
        document.query("main").replace_children("<p>stale</p>")
        render_all_players(document, [])
        assert "stale" not in document.query("main").inner_html()

    def test_markup_is_escaped(self, document):
        (player,) = _players({**FIDO, "name": '<script>alert("x")</script>'})
        render_all_players(document, [player])
        main = document.query("main").inner_html()
        assert "<script>" not in main
        assert "&lt;script&gt;" in main

    def test_missing_main_region_is_logged(self, caplog):
        document = Document([Region("header", "header")])
        assert render_all_players(document, _players(FIDO)) is False
        assert "Failed to render players." in caplog.text

    def test_no_collection_is_logged(self, document, caplog):
        assert render_all_players(document, None) is False
        assert "Failed to render players." in caplog.text


class TestDetailView:
    def test_unassigned_when_team_is_null(self, document):
        (fido,) = _players(FIDO)
        assert render_single_player(document, fido) is True
        main = document.query("main").inner_html()
        assert "Current Team: Unassigned" in main
        assert "Player Id: 1" in main
        assert "Breed: Lab" in main
        assert 'alt="Fido"' in main
        assert 'value="return"' in main

    def test_unassigned_when_team_is_absent(self, document):
        player = Player.model_validate({"id": 3, "name": "Nomad"})
        render_single_player(document, player)
        assert "Current Team: Unassigned" in document.query("main").inner_html()

    def test_team_id_is_shown(self, document):
        _, rex = _players(FIDO, REX)
        render_single_player(document, rex)
        assert "Current Team: 4" in document.query("main").inner_html()

    def test_team_zero_is_not_unassigned(self, document):
        player = Player.model_validate({"id": 3, "name": "Zero", "teamId": 0})
        render_single_player(document, player)
        assert "Current Team: 0" in document.query("main").inner_html()

    def test_header_shows_name_and_form_is_hidden(self, document):
        (fido,) = _players(FIDO)
        render_main_page_heading(document)
        render_single_player(document, fido)
        assert document.query("header").inner_html() == "<h1>Fido</h1>"
        assert document.query("#new-player-form").hidden is True

    def test_missing_form_leaves_document_untouched(self, caplog):
        document = Document([Region("header", "header"), Region("main", "main")])
        document.query("main").replace_children("<p>list</p>")
        (fido,) = _players(FIDO)

        assert render_single_player(document, fido) is False
        assert document.query("main").inner_html() == "<p>list</p>"
        assert "Failed to render player." in caplog.text


class TestHeadingAndForm:
    def test_heading_uses_page_title(self, document):
        render_main_page_heading(document)
        assert document.query("header").inner_html() == "<h1>Puppy Bowl</h1>"

    def test_form_has_five_fields_and_binds_handler(self, document):
        seen = []
        render_new_player_form(document, seen.append)
        form = document.query("#new-player-form")
        for name in ("playerName", "playerBreed", "playerStatus", "playerImage", "playerTeam"):
            assert f'name="{name}"' in form.inner_html()

        document.dispatch("#new-player-form", "submit", {"playerName": "Ace"})
        assert seen[0].action == "submit"
        assert seen[0].fields["playerName"] == "Ace"

    def test_reset_repaints_empty_inputs(self, document):
        render_new_player_form(document)
        form = document.query("#new-player-form")
        fresh = form.inner_html()
        form.replace_children('<input type="text" name="playerName" value="Ace" />')
        reset_new_player_form(document)
        assert form.inner_html() == fresh
        assert "value=" not in fresh

    def test_form_region_keeps_no_field_values(self, document):
        render_new_player_form(document)
        document.dispatch("#new-player-form", "submit", {"playerName": "Ace"})
        form = document.query("#new-player-form")
        assert not hasattr(form, "values")
        assert "Ace" not in form.inner_html()

    def test_query_unknown_selector_raises(self, document):
        with pytest.raises(RenderError):
            document.query("aside")
