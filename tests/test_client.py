import json
import unittest
import uuid
from datetime import datetime, timezone

import httpx

from guilded_client import (
    ChannelId,
    DocId,
    EmoteId,
    ForumThreadId,
    GroupId,
    GuildedAPIError,
    GuildedClient,
    GuildedDecodeError,
    InvalidTokenError,
    ListItemId,
    MessageId,
    RequestAlreadySentError,
    RoleId,
    ServerId,
    UserId,
)
from guilded_client.models import ChannelType, ChatEmbed, ChatMessage, ServerMemberBan, SocialMediaType

CHANNEL = ChannelId(uuid.UUID("6c1f0d3e-2b4a-4c5d-8e9f-0a1b2c3d4e5f"))
MESSAGE = MessageId(uuid.UUID(int=42))
SERVER = ServerId("srv12345")
USER = UserId("usr12345")
PREFIX = "/api/v1"


def _message_json(content: str = "hi") -> dict:
    return {
        "id": str(MESSAGE),
        "type": "default",
        "serverId": str(SERVER),
        "channelId": str(CHANNEL),
        "content": content,
        "createdAt": "2024-03-01T10:00:05.000Z",
        "createdBy": str(USER),
    }


def _ban_json(reason=None) -> dict:
    ban = {
        "user": {"id": str(USER), "name": "Ann"},
        "createdBy": "mod12345",
        "createdAt": "2024-03-01T10:00:05.000Z",
    }
    if reason is not None:
        ban["reason"] = reason
    return {"serverMemberBan": ban}


class _FakeServer:
    """Records every request and answers with the next queued response."""

    def __init__(self, *responses: httpx.Response):
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)

    def client(self) -> GuildedClient:
        return GuildedClient("tok", transport=httpx.MockTransport(self))

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)


class TestConstruction(unittest.TestCase):
    def test_invalid_token(self) -> None:
        with self.assertRaises(InvalidTokenError):
            GuildedClient("bad\ntoken")
        with self.assertRaises(InvalidTokenError):
            GuildedClient("tök")

    def test_builders_check_id_kinds(self) -> None:
        client = GuildedClient("tok", transport=httpx.MockTransport(lambda r: httpx.Response(204)))
        with self.assertRaises(TypeError):
            client.get_channel(DocId(1))  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            client.get_channel(str(CHANNEL))  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            client.add_reaction(CHANNEL, RoleId(1), EmoteId(1))  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            client.award_member(SERVER, USER, True)


class TestMessages(unittest.IsolatedAsyncioTestCase):
    async def test_create_message_end_to_end(self) -> None:
        server = _FakeServer(httpx.Response(201, json={"message": _message_json("hello")}))
        async with server.client() as client:
            msg = await (
                client.send_message(CHANNEL, "hello")
                .silent()
                .add_reply(MESSAGE)
                .add_embed(ChatEmbed(title="t"))
                .send()
            )

        self.assertIsInstance(msg, ChatMessage)
        self.assertEqual(msg.id, MESSAGE)
        self.assertEqual(msg.content, "hello")

        request = server.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.host, "www.guilded.gg")
        self.assertEqual(request.url.path, f"{PREFIX}/channels/{CHANNEL}/messages")
        self.assertEqual(request.headers["Authorization"], "Bearer tok")
        self.assertEqual(request.headers["Content-Type"], "application/json")
        self.assertTrue(request.headers["User-Agent"].startswith("guilded-client/"))
        self.assertEqual(
            server.body(),
            {
                "content": "hello",
                "embeds": [{"title": "t"}],
                "isSilent": True,
                "replyMessageIds": [str(MESSAGE)],
            },
        )

    async def test_minimal_message_body(self) -> None:
        server = _FakeServer(httpx.Response(201, json={"message": _message_json()}))
        async with server.client() as client:
            await client.send_message(CHANNEL, "hi").send()
        self.assertEqual(server.body(), {"content": "hi"})

    async def test_query_building(self) -> None:
        server = _FakeServer(
            httpx.Response(200, json={"messages": []}),
            httpx.Response(200, json={"messages": [_message_json()]}),
        )
        async with server.client() as client:
            self.assertEqual(await client.get_messages(CHANNEL).send(), [])
            page = await (
                client.get_messages(CHANNEL)
                .before(datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc))
                .after(datetime(2024, 2, 1))
                .limit(50)
                .private(False)
                .send()
            )

        self.assertEqual(len(page), 1)
        self.assertEqual(server.requests[0].url.query, b"")
        params = server.requests[1].url.params
        self.assertEqual(params["before"], "2024-03-01T12:00:00.000Z")
        self.assertEqual(params["after"], "2024-02-01T00:00:00.000Z")
        self.assertEqual(params["limit"], "50")
        self.assertEqual(params["private"], "false")

    async def test_update_and_delete_message(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"message": _message_json("edited")}), httpx.Response(204))
        async with server.client() as client:
            msg = await client.update_message(CHANNEL, MESSAGE, "edited").send()
            result = await client.delete_message(CHANNEL, MESSAGE).send()

        self.assertEqual(msg.content, "edited")
        self.assertIsNone(result)
        self.assertEqual(server.requests[0].method, "PUT")
        self.assertEqual(server.body(0), {"content": "edited"})
        self.assertEqual(server.requests[1].method, "DELETE")
        self.assertEqual(server.requests[1].url.path, f"{PREFIX}/channels/{CHANNEL}/messages/{MESSAGE}")


class TestBuilderReuse(unittest.IsolatedAsyncioTestCase):
    async def test_send_twice_fails(self) -> None:
        server = _FakeServer(httpx.Response(201, json={"message": _message_json()}))
        async with server.client() as client:
            request = client.send_message(CHANNEL, "hi")
            await request.send()
            with self.assertRaises(RequestAlreadySentError):
                await request.send()
            with self.assertRaises(RequestAlreadySentError):
                request.silent()
        self.assertEqual(len(server.requests), 1)

    async def test_setter_leaves_receiver_unchanged(self) -> None:
        server = _FakeServer(
            httpx.Response(200, json=_ban_json()),
            httpx.Response(200, json=_ban_json("spam")),
        )
        async with server.client() as client:
            plain = client.ban_user(SERVER, USER)
            with_reason = plain.reason("spam")
            self.assertIsNot(plain, with_reason)
            await plain.send()
            ban = await with_reason.send()

        self.assertEqual(server.body(0), {})
        self.assertEqual(server.body(1), {"reason": "spam"})
        self.assertEqual(ban.reason, "spam")

    async def test_stream_seals_builder(self) -> None:
        client = GuildedClient("tok", transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"docs": []})))
        request = client.get_docs(CHANNEL)
        request.stream()
        with self.assertRaises(RequestAlreadySentError):
            await request.send()
        with self.assertRaises(RequestAlreadySentError):
            request.limit(5)
        await client.aclose()


class TestBans(unittest.IsolatedAsyncioTestCase):
    async def test_ban_user(self) -> None:
        server = _FakeServer(httpx.Response(200, json=_ban_json("spam")))
        async with server.client() as client:
            ban = await client.ban_user(SERVER, USER).reason("spam").send()

        self.assertIsInstance(ban, ServerMemberBan)
        self.assertEqual(ban.user.id, USER)
        self.assertEqual(server.requests[0].method, "POST")
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/servers/{SERVER}/bans/{USER}")

    async def test_ban_error_status(self) -> None:
        server = _FakeServer(httpx.Response(403, json={"code": "Forbidden", "message": "Missing permission"}))
        async with server.client() as client:
            with self.assertRaises(GuildedAPIError) as cm:
                await client.ban_user(SERVER, USER).send()

        self.assertEqual(cm.exception.status_code, 403)
        self.assertEqual(cm.exception.detail, {"code": "Forbidden", "message": "Missing permission"})
        self.assertIn("403", str(cm.exception))

    async def test_get_ban_not_found(self) -> None:
        server = _FakeServer(httpx.Response(404, text="not found"))
        async with server.client() as client:
            with self.assertRaises(GuildedAPIError) as cm:
                await client.get_ban(SERVER, USER).send()
        self.assertEqual(cm.exception.status_code, 404)
        self.assertEqual(cm.exception.detail, {"message": "not found"})

    async def test_get_bans_is_single_shot(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"serverMemberBans": [_ban_json()["serverMemberBan"]]}))
        async with server.client() as client:
            bans = await client.get_bans(SERVER).send()
        self.assertEqual(len(bans), 1)
        self.assertEqual(len(server.requests), 1)

    async def test_user_id_is_percent_encoded(self) -> None:
        server = _FakeServer(httpx.Response(204))
        async with server.client() as client:
            await client.delete_ban(SERVER, UserId("a/b c")).send()
        self.assertEqual(server.requests[0].url.raw_path, f"{PREFIX}/servers/{SERVER}/bans/a%2Fb%20c".encode())


class TestOtherOperations(unittest.IsolatedAsyncioTestCase):
    async def test_reaction_path(self) -> None:
        server = _FakeServer(httpx.Response(204))
        async with server.client() as client:
            result = await client.add_reaction(CHANNEL, DocId(9), EmoteId(90000001)).send()
        self.assertIsNone(result)
        request = server.requests[0]
        self.assertEqual(request.method, "PUT")
        self.assertEqual(request.url.path, f"{PREFIX}/channels/{CHANNEL}/content/9/emotes/90000001")

    async def test_award_member_returns_total(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"total": 150}))
        async with server.client() as client:
            total = await client.award_member(SERVER, USER, 10).send()
        self.assertEqual(total, 150)
        self.assertEqual(server.body(), {"amount": 10})
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/servers/{SERVER}/members/{USER}/xp")

    async def test_award_member_rejects_string_total(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"total": "150"}))
        async with server.client() as client:
            with self.assertRaises(GuildedDecodeError):
                await client.award_member(SERVER, USER, 10).send()

    async def test_award_role(self) -> None:
        server = _FakeServer(httpx.Response(204))
        async with server.client() as client:
            await client.award_role(SERVER, RoleId(7), -5).send()
        self.assertEqual(server.body(), {"amount": -5})
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/servers/{SERVER}/roles/7/xp")

    async def test_member_roles(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"roleIds": [1, 2]}), httpx.Response(204))
        async with server.client() as client:
            roles = await client.get_member_roles(SERVER, USER).send()
            await client.assign_role(SERVER, USER, RoleId(3)).send()
        self.assertEqual(roles, [RoleId(1), RoleId(2)])
        self.assertEqual(server.requests[1].method, "PUT")
        self.assertEqual(server.requests[1].url.path, f"{PREFIX}/servers/{SERVER}/members/{USER}/roles/3")

    async def test_nickname(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"nickname": "Annie"}))
        async with server.client() as client:
            nickname = await client.update_nickname(SERVER, USER, "Annie").send()
        self.assertEqual(nickname, "Annie")
        self.assertEqual(server.body(), {"nickname": "Annie"})

    async def test_nickname_rejects_non_string(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"nickname": 7}))
        async with server.client() as client:
            with self.assertRaises(GuildedDecodeError):
                await client.update_nickname(SERVER, USER, "7").send()

    async def test_create_channel_body(self) -> None:
        channel = {
            "id": str(CHANNEL),
            "type": "list",
            "name": "todo",
            "createdAt": "2024-01-01T00:00:00Z",
            "createdBy": str(USER),
            "serverId": str(SERVER),
            "groupId": "grp12345",
            "isPublic": True,
        }
        server = _FakeServer(httpx.Response(201, json={"channel": channel}))
        async with server.client() as client:
            created = await client.create_channel(SERVER, "todo", ChannelType.LIST).public().topic("chores").send()
        self.assertIs(created.channel_type, ChannelType.LIST)
        self.assertEqual(
            server.body(),
            {"name": "todo", "topic": "chores", "isPublic": True, "type": "list", "serverId": str(SERVER)},
        )

    async def test_list_item_note(self) -> None:
        item = {
            "id": "11111111-2222-3333-4444-555555555555",
            "serverId": str(SERVER),
            "channelId": str(CHANNEL),
            "message": "buy milk",
            "createdAt": "2024-01-01T00:00:00Z",
            "createdBy": str(USER),
            "note": {"createdAt": "2024-01-01T00:00:00Z", "createdBy": str(USER), "content": "2%"},
        }
        server = _FakeServer(httpx.Response(201, json={"listItem": item}))
        async with server.client() as client:
            created = await client.create_list_item(CHANNEL, "buy milk").note("2%").send()
        self.assertEqual(created.note.content, "2%")
        self.assertEqual(server.body(), {"message": "buy milk", "note": {"content": "2%"}})

    async def test_group_membership(self) -> None:
        server = _FakeServer(httpx.Response(204), httpx.Response(204))
        async with server.client() as client:
            await client.add_group_member(GroupId("grp12345"), USER).send()
            await client.delete_group_member(GroupId("grp12345"), USER).send()
        self.assertEqual([r.method for r in server.requests], ["PUT", "DELETE"])
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/groups/grp12345/members/{USER}")


class TestTransportFailures(unittest.IsolatedAsyncioTestCase):
    async def test_unexpected_envelope(self) -> None:
        server = _FakeServer(httpx.Response(200, json={"message": _message_json(), "extra": 1}))
        async with server.client() as client:
            with self.assertRaises(GuildedDecodeError):
                await client.get_message(CHANNEL, MESSAGE).send()

    async def test_non_json_body(self) -> None:
        server = _FakeServer(httpx.Response(200, text="<html>oops</html>"))
        async with server.client() as client:
            with self.assertRaises(GuildedDecodeError):
                await client.get_channel(CHANNEL).send()

    async def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with GuildedClient("tok", transport=httpx.MockTransport(handler)) as client:
            with self.assertRaises(GuildedAPIError) as cm:
                await client.get_channel(CHANNEL).send()
        self.assertIsNone(cm.exception.status_code)

    async def test_custom_api_base(self) -> None:
        server = _FakeServer(httpx.Response(204))
        client = GuildedClient("tok", api_base="http://localhost:9000/v1/", transport=httpx.MockTransport(server))
        await client.delete_channel(CHANNEL).send()
        await client.aclose()
        self.assertEqual(str(server.requests[0].url), f"http://localhost:9000/v1/channels/{CHANNEL}")


class TestMembersAndContent(unittest.IsolatedAsyncioTestCase):
    async def test_members(self) -> None:
        summary = {"user": {"id": str(USER), "name": "Ann"}, "roleIds": [1]}
        server = _FakeServer(httpx.Response(200, json={"members": [summary]}), httpx.Response(204))
        async with server.client() as client:
            members = await client.get_members(SERVER).send()
            await client.kick_member(SERVER, USER).send()
        self.assertEqual(members[0].role_ids, frozenset({RoleId(1)}))
        self.assertEqual(server.requests[1].method, "DELETE")
        self.assertEqual(server.requests[1].url.path, f"{PREFIX}/servers/{SERVER}/members/{USER}")

    async def test_social_link(self) -> None:
        link = {"type": "steam", "userId": str(USER), "handle": "ann"}
        server = _FakeServer(httpx.Response(200, json={"socialLink": link}))
        async with server.client() as client:
            result = await client.get_social_link(SERVER, USER, SocialMediaType.STEAM).send()
        self.assertEqual(result.handle, "ann")
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/servers/{SERVER}/members/{USER}/social-links/steam")

    async def test_create_thread(self) -> None:
        thread = {
            "id": 123,
            "serverId": str(SERVER),
            "channelId": str(CHANNEL),
            "title": "Hello",
            "content": "World",
            "createdAt": "2024-01-01T00:00:00Z",
            "createdBy": str(USER),
        }
        server = _FakeServer(httpx.Response(201, json={"forumThread": thread}))
        async with server.client() as client:
            created = await client.create_thread(CHANNEL, "Hello", "World").send()
        self.assertEqual(created.id, ForumThreadId(123))
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/channels/{CHANNEL}/forum")
        self.assertEqual(server.body(), {"title": "Hello", "content": "World"})

    async def test_list_item_lifecycle(self) -> None:
        item_id = ListItemId(uuid.UUID("11111111-2222-3333-4444-555555555555"))
        server = _FakeServer(
            httpx.Response(200, json={"listItems": []}),
            httpx.Response(204),
            httpx.Response(204),
            httpx.Response(204),
        )
        async with server.client() as client:
            self.assertEqual(await client.get_list_items(CHANNEL).send(), [])
            await client.complete_list_item(CHANNEL, item_id).send()
            await client.uncomplete_list_item(CHANNEL, item_id).send()
            await client.delete_list_item(CHANNEL, item_id).send()

        item_path = f"{PREFIX}/channels/{CHANNEL}/items/{item_id}"
        self.assertEqual(
            [(r.method, r.url.path) for r in server.requests],
            [
                ("GET", f"{PREFIX}/channels/{CHANNEL}/items"),
                ("POST", f"{item_path}/complete"),
                ("DELETE", f"{item_path}/complete"),
                ("DELETE", item_path),
            ],
        )

    async def test_doc_update(self) -> None:
        doc = {
            "id": 5,
            "serverId": str(SERVER),
            "channelId": str(CHANNEL),
            "title": "New",
            "content": "Body",
            "createdAt": "2024-01-01T00:00:00Z",
            "createdBy": str(USER),
            "updatedAt": "2024-01-02T00:00:00Z",
            "updatedBy": str(USER),
        }
        server = _FakeServer(httpx.Response(200, json={"doc": doc}))
        async with server.client() as client:
            updated = await client.update_doc(CHANNEL, DocId(5), "New", "Body").send()
        self.assertEqual(updated.id, DocId(5))
        self.assertEqual(server.requests[0].method, "PUT")
        self.assertEqual(server.requests[0].url.path, f"{PREFIX}/channels/{CHANNEL}/docs/5")
        self.assertEqual(server.body(), {"title": "New", "content": "Body"})
