"""Integration tests for routes."""


def test_home_page(client):
    """Home page is accessible."""
    response = client.get("/")
    assert response.is_success
    assert "Islet" in response.body


def test_help_page_lists_verbs(client):
    """Help page lists the verbs."""
    response = client.get("/help")
    assert response.is_success
    assert "examine" in response.body


def test_about_page(client):
    """About page is accessible."""
    response = client.get("/about")
    assert response.is_success
    assert "Gemini" in response.body


def test_play_page(client):
    """Play page shows the starting room."""
    response = client.get("/play")
    assert response.is_success
    assert "You are on a sandy beach" in response.body
    assert "You can go: South, East" in response.body


def test_go_direction(client):
    """Going a direction via /go/ moves the player."""
    response = client.get("/go/s")
    assert response.is_success
    assert "You are in a tidal cave" in response.body


def test_go_blocked(client):
    """A blocked direction explains itself."""
    response = client.get("/go/n")
    assert response.is_success
    assert "You can't go that way" in response.body


def test_cmd_input_prompt(client):
    """The /cmd route prompts for input when no query."""
    response = client.get("/cmd")
    assert response.is_input_required


def test_cmd_with_input(client):
    """The /cmd route processes commands."""
    client.get("/go/e")
    response = client.get_input("/cmd", "take rope")
    assert response.is_success
    assert "Taken" in response.body


def test_cmd_unknown_word(client):
    """Nonsense gets a short rebuke."""
    response = client.get_input("/cmd", "xyzzy")
    assert response.is_success
    assert "What!!" in response.body


def test_map_route(client):
    """The map marks the player's room."""
    client.get("/go/e")
    response = client.get("/map")
    assert response.is_success
    assert "[@]" in response.body
    assert "beside a rocky cove" in response.body


def test_saves_when_empty(client):
    """With no saves the play page says so."""
    response = client.get("/saves")
    assert response.is_success
    assert "There are no saved games" in response.body


def test_save_and_load(client):
    """A saved game shows in the list and can be restored."""
    client.get("/go/e")
    client.get_input("/cmd", "save")
    client.get("/go/e")

    response = client.get("/saves")
    assert response.is_success
    assert "/saves/load/1" in response.body

    response = client.get("/saves/load/1")
    assert response.is_success
    assert "Game loaded" in response.body
    assert "You are beside a rocky cove" in response.body


def test_new_game_prompt(client):
    """The /new route prompts for confirmation."""
    response = client.get("/new")
    assert response.is_input_required


def test_new_game_confirmed(client):
    """Confirming starts over on the beach."""
    client.get("/go/s")
    response = client.get_input("/new", "YES")
    assert response.is_success
    assert "A new adventure begins!" in response.body
    assert "You are on a sandy beach" in response.body


def test_quit_then_game_over(client):
    """After quitting, further commands are refused."""
    response = client.get_input("/cmd", "quit")
    assert response.is_success
    assert "Final score: 135" in response.body

    response = client.get("/go/s")
    assert response.is_success
    assert "The game is over." in response.body


def test_restart_command_resets(client):
    """The restart command starts a fresh game."""
    client.get("/go/s")
    response = client.get_input("/cmd", "restart")
    assert response.is_success
    assert "A new adventure begins!" in response.body
    assert "You are on a sandy beach" in response.body
