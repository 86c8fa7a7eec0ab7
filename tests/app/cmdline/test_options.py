from app.cmdline.options import Options, PlayerAction, UrlListAction, is_empty


def test_default_options_are_empty():
    assert is_empty(Options())
    assert Options().is_empty()


def test_any_field_change_makes_options_non_empty():
    changed = [
        Options(player_action=PlayerAction.PAUSE),
        Options(set_volume=0),
        Options(volume_modifier=-4),
        Options(seek_to=0),
        Options(play_track_at=0),
        Options(show_osd=True),
        Options(urls=("http://example.com/x",)),
    ]
    for options in changed:
        assert not options.is_empty(), options


def test_url_list_action_alone_is_still_empty():
    # -l без файлов ничего не делает
    assert Options(url_list_action=UrlListAction.LOAD).is_empty()


def test_enum_ordinals_are_fixed():
    assert [int(a) for a in PlayerAction] == [0, 1, 2, 3, 4, 5, 6]
    assert PlayerAction.PLAY_PAUSE == 2
    assert PlayerAction.NEXT == 6
    assert UrlListAction.APPEND == 0
    assert UrlListAction.LOAD == 1


def test_describe_mentions_set_fields():
    text = Options(player_action=PlayerAction.PLAY, set_volume=50, volume_modifier=4, show_osd=True).describe()
    assert "action=play" in text
    assert "volume=50" in text
    assert "volume_modifier=+4" in text
    assert "osd" in text
    assert "seek_to" not in Options().describe()
