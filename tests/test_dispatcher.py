import asyncio
import logging

from telegram.error import NetworkError

from handlers.dispatcher import split_message
from models.command import ListCatalog, ShowImageForBreed, ShowPrice, ShowRandomImage

CHAT_ID = 42


def test_doggo_sends_exactly_one_photo(upstream, dispatcher, bot):
    upstream.add("/api/breeds/image/random", {"message": "http://x/y.jpg", "status": "success"})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowRandomImage()))

    bot.send_photo.assert_awaited_once_with(chat_id=CHAT_ID, photo="http://x/y.jpg")
    bot.send_message.assert_not_awaited()


def test_doggo_non_success_sends_nothing(upstream, dispatcher, bot, caplog):
    upstream.add("/api/breeds/image/random", {"message": "http://x/y.jpg", "status": "error"})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowRandomImage()))

    bot.send_photo.assert_not_awaited()
    bot.send_message.assert_not_awaited()
    assert "Could not find a dog" in caplog.text


def test_breed_requests_normalized_path(upstream, dispatcher, bot):
    upstream.add("/api/breed/heeler/blue/images/random",
                 {"message": "http://x/heeler.jpg", "status": "success"})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowImageForBreed(breed="Blue Heeler")))

    assert upstream.requests[0].url.path.endswith("/breed/heeler/blue/images/random")
    bot.send_photo.assert_awaited_once_with(chat_id=CHAT_ID, photo="http://x/heeler.jpg")


def test_unknown_breed_sends_not_found_text(upstream, dispatcher, bot):
    upstream.add("/api/breed/unicorn/images/random",
                 {"message": "Breed not found", "status": "error", "code": 404}, status_code=404)

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowImageForBreed(breed="Unicorn")))

    bot.send_photo.assert_not_awaited()
    bot.send_message.assert_awaited_once_with(chat_id=CHAT_ID, text="Breed 'Unicorn' doesn't exist")


def test_breed_transport_error_is_silent(dispatcher, bot, caplog):
    # no route registered: the fake upstream refuses the connection
    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowImageForBreed(breed="Husky")))

    bot.send_photo.assert_not_awaited()
    bot.send_message.assert_not_awaited()
    assert "Could not find a dog of breed 'Husky'" in caplog.text


def test_breeds_sends_catalog(upstream, dispatcher, bot):
    upstream.add("/api/breeds/list/all",
                 {"message": {"pug": [], "hound": ["afghan"]}, "status": "success"})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ListCatalog()))

    bot.send_message.assert_awaited_once_with(
        chat_id=CHAT_ID, text="-│ hound\n     |> afghan\n-│ pug"
    )


def test_euro_sends_price(upstream, dispatcher, bot):
    upstream.add("/api/v3/simple/price", {"tether-eurt": {"usd": 1.07}})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowPrice()))

    bot.send_message.assert_awaited_once_with(chat_id=CHAT_ID, text="$1.07")


def test_euro_missing_key_logs_and_sends_nothing(upstream, dispatcher, bot, caplog):
    upstream.add("/api/v3/simple/price", {})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowPrice()))

    bot.send_message.assert_not_awaited()
    assert "Could not fetch the value of Euro" in caplog.text


def test_send_failure_is_logged_not_raised(upstream, dispatcher, bot, caplog):
    upstream.add("/api/breeds/image/random", {"message": "http://x/y.jpg", "status": "success"})
    bot.send_photo.side_effect = NetworkError("telegram unreachable")

    with caplog.at_level(logging.INFO):
        asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowRandomImage()))

    assert "Error while sending photo" in caplog.text
    assert "Photo sent" not in caplog.text


def test_split_message_respects_limit():
    text = "\n".join(f"line {i}" for i in range(10))
    chunks = split_message(text, limit=20)
    assert all(len(chunk) <= 20 for chunk in chunks)
    assert "\n".join(chunks) == text


def test_breed_with_control_character_never_raises(dispatcher, bot):
    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowImageForBreed(breed="a\x7fb")))
    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowImageForBreed(breed="a\x00b")))

    bot.send_photo.assert_not_awaited()


def test_breeds_non_success_sends_nothing(upstream, dispatcher, bot, caplog):
    upstream.add("/api/breeds/list/all", {"message": "boom", "status": "error"})

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ListCatalog()))

    bot.send_message.assert_not_awaited()
    assert "Could not get the list of breeds" in caplog.text


def test_text_send_failure_is_logged_not_raised(upstream, dispatcher, bot, caplog):
    upstream.add("/api/v3/simple/price", {"tether-eurt": {"usd": 1.07}})
    bot.send_message.side_effect = NetworkError("telegram unreachable")

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ShowPrice()))

    bot.send_message.assert_awaited_once()
    assert "Error while sending message" in caplog.text


def test_failed_catalog_chunk_stops_the_rest(upstream, dispatcher, bot):
    breeds = {f"breed{i:04d}": ["sub-breed-with-a-long-name"] * 20 for i in range(40)}
    upstream.add("/api/breeds/list/all", {"message": breeds, "status": "success"})
    bot.send_message.side_effect = NetworkError("telegram unreachable")

    asyncio.run(dispatcher.dispatch(bot, CHAT_ID, ListCatalog()))

    assert bot.send_message.await_count == 1
