"""
Tests unitaires pour PlatformService.

Tests couvrant:
- comptes et session (inscription, connexion, deconnexion)
- chaines, uploads et controle de propriete
- visionnage connecte et anonyme
- commentaires, likes et suppression
- playlists et leur lecture
- recherche et listings
"""

import pytest

from vidshare.core.value_objects import OpStatus, PlaylistEntry
from vidshare.infrastructure.persistence import InMemoryVideoRepository
from vidshare.services.platform import PlatformService, Session


# ============================================================================
# Comptes et session
# ============================================================================


class TestAccounts:
    """Tests pour register / login / logout."""

    def test_register(self, platform: PlatformService, user_repo):
        result = platform.register("alice")
        assert result.is_success
        assert user_repo.get_by_username("alice") is not None

    def test_register_empty_name(self, platform: PlatformService, user_repo):
        assert platform.register("").status is OpStatus.INVALID_INPUT
        assert user_repo.get_by_username("") is None

    def test_register_duplicate(self, platform: PlatformService):
        platform.register("alice")
        assert platform.register("alice").status is OpStatus.ALREADY_EXISTS

    def test_login_unknown_user(self, platform: PlatformService):
        result = platform.login("ghost")
        assert result.status is OpStatus.NOT_FOUND
        assert platform.current_user is None

    def test_login_sets_session(self, platform: PlatformService):
        platform.register("alice")
        assert platform.login("alice").is_success
        assert platform.current_user.username == "alice"

    def test_login_switches_user(self, platform: PlatformService):
        platform.register("alice")
        platform.register("bob")
        platform.login("alice")
        platform.login("bob")
        assert platform.current_user.username == "bob"

    def test_logout(self, alice_platform: PlatformService):
        assert alice_platform.logout().is_success
        assert alice_platform.current_user is None

    def test_logout_without_session(self, platform: PlatformService):
        assert platform.logout().status is OpStatus.NOT_LOGGED_IN

    def test_session_starts_anonymous(self):
        assert Session().is_authenticated is False


class TestSessionRequired:
    """Les commandes marquees 'connexion requise' echouent en NOT_LOGGED_IN."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda p: p.create_channel("Vlogs"),
            lambda p: p.upload("Vlogs", "Intro", 120),
            lambda p: p.subscribe("Vlogs"),
            lambda p: p.unsubscribe("Vlogs"),
            lambda p: p.comment(1, "Top"),
            lambda p: p.like_comment(1, 2),
            lambda p: p.remove_comment(1, 2),
            lambda p: p.create_playlist("favoris"),
            lambda p: p.add_to_playlist("favoris", 1),
            lambda p: p.play_playlist("favoris"),
        ],
    )
    def test_requires_session(self, platform: PlatformService, call):
        assert call(platform).status is OpStatus.NOT_LOGGED_IN


# ============================================================================
# Chaines et uploads
# ============================================================================


class TestChannels:
    """Tests pour create_channel / upload / abonnements."""

    def test_create_channel_owned_by_current_user(self, alice_platform, channel_repo):
        channel = channel_repo.get_by_name("Vlogs")
        assert channel.owner == "alice"
        assert channel.description == "Mes vlogs"

    def test_create_channel_empty_name(self, alice_platform):
        assert alice_platform.create_channel("").status is OpStatus.INVALID_INPUT

    def test_create_channel_duplicate(self, alice_platform):
        assert alice_platform.create_channel("Vlogs").status is OpStatus.ALREADY_EXISTS

    def test_upload_registers_video(self, alice_platform, video_repo):
        result = alice_platform.upload("Vlogs", "Intro", 120)
        assert result.is_success
        video = video_repo.get_by_id(result.id)
        assert video is result.value
        assert video.views == 0
        assert video.uploader == "Vlogs"

    def test_upload_unknown_channel(self, alice_platform, video_repo):
        assert alice_platform.upload("Absente", "Intro", 120).status is OpStatus.NOT_FOUND
        assert video_repo.list_all() == []

    def test_upload_requires_ownership(self, alice_platform, video_repo):
        alice_platform.register("bob")
        alice_platform.login("bob")
        result = alice_platform.upload("Vlogs", "Intrus", 60)
        assert result.status is OpStatus.PERMISSION_DENIED
        assert video_repo.list_all() == []

    def test_upload_negative_duration(self, alice_platform, video_repo):
        result = alice_platform.upload("Vlogs", "Intro", -1)
        assert result.status is OpStatus.INVALID_INPUT
        assert video_repo.list_all() == []

    def test_subscribe_twice(self, alice_platform, channel_repo):
        """Un double abonnement laisse un seul abonne et retourne ALREADY_EXISTS."""
        assert alice_platform.subscribe("Vlogs").is_success
        second = alice_platform.subscribe("Vlogs")
        assert second.status is OpStatus.ALREADY_EXISTS
        assert len(channel_repo.get_by_name("Vlogs").subscribers) == 1

    def test_subscribe_unknown_channel(self, alice_platform):
        assert alice_platform.subscribe("Absente").status is OpStatus.NOT_FOUND

    def test_unsubscribe(self, alice_platform, channel_repo):
        alice_platform.subscribe("Vlogs")
        assert alice_platform.unsubscribe("Vlogs").is_success
        assert channel_repo.get_by_name("Vlogs").subscribers == set()
        assert alice_platform.unsubscribe("Vlogs").status is OpStatus.NOT_FOUND

    def test_list_channel_uploads(self, alice_platform):
        alice_platform.upload("Vlogs", "Un", 10)
        alice_platform.upload("Vlogs", "Deux", 10)
        result = alice_platform.list_channel_uploads("Vlogs")
        assert [v.title for v in result.value] == ["Un", "Deux"]

    def test_list_uploads_unknown_channel(self, platform):
        assert platform.list_channel_uploads("Absente").status is OpStatus.NOT_FOUND


# ============================================================================
# Visionnage
# ============================================================================


class TestWatch:
    """Tests pour watch / pause."""

    def test_alice_scenario(self, alice_platform: PlatformService):
        """Upload puis deux visionnages : historique double, une seule vue."""
        upload = alice_platform.upload("Vlogs", "Intro", 120)
        video = upload.value
        assert video.views == 0

        first = alice_platform.watch(upload.id)
        assert first.is_success
        assert first.value == 1
        assert video.views == 1

        second = alice_platform.watch(upload.id)
        assert second.status is OpStatus.ALREADY_EXISTS
        assert alice_platform.current_user.history == [upload.id, upload.id]
        assert video.views == 1

    def test_anonymous_watch_unknown_id(self, platform: PlatformService, video_repo):
        result = platform.watch(42)
        assert result.status is OpStatus.NOT_FOUND
        assert video_repo.list_all() == []

    def test_anonymous_watch_plays_directly(self, alice_platform: PlatformService):
        video_id = alice_platform.upload("Vlogs", "Intro", 120).id
        user = alice_platform.current_user
        alice_platform.logout()

        result = alice_platform.watch(video_id)
        assert result.is_success
        assert user.history == []

    def test_pause(self, alice_platform: PlatformService):
        video_id = alice_platform.upload("Vlogs", "Intro", 120).id
        assert alice_platform.pause(video_id).status is OpStatus.INVALID_INPUT
        alice_platform.watch(video_id)
        assert alice_platform.pause(video_id).is_success
        assert alice_platform.watch(video_id).value == 2

    def test_pause_unknown_video(self, platform: PlatformService):
        assert platform.pause(1).status is OpStatus.NOT_FOUND


# ============================================================================
# Commentaires
# ============================================================================


class TestComments:
    """Tests pour comment / like_comment / remove_comment / list_comments."""

    @pytest.fixture
    def video_id(self, alice_platform: PlatformService) -> int:
        return alice_platform.upload("Vlogs", "Intro", 120).id

    def test_comment_and_list(self, alice_platform, video_id):
        result = alice_platform.comment(video_id, "Premier !")
        assert result.is_success
        listing = alice_platform.list_comments(video_id)
        assert [(c.id, c.author, c.text) for c in listing.value] == [
            (result.id, "alice", "Premier !")
        ]

    def test_comment_unknown_video(self, alice_platform):
        assert alice_platform.comment(999, "x").status is OpStatus.NOT_FOUND

    def test_list_comments_unknown_video(self, platform):
        assert platform.list_comments(999).status is OpStatus.NOT_FOUND

    def test_list_comments_anonymous(self, alice_platform, video_id):
        alice_platform.comment(video_id, "Top")
        alice_platform.logout()
        assert len(alice_platform.list_comments(video_id).value) == 1

    def test_like_comment(self, alice_platform, video_id):
        cid = alice_platform.comment(video_id, "Top").id
        assert alice_platform.like_comment(video_id, cid).value == 1

    def test_repeat_likes_accumulate(self, alice_platform, video_id):
        """Choix assume : un meme utilisateur peut liker plusieurs fois."""
        cid = alice_platform.comment(video_id, "Top").id
        alice_platform.like_comment(video_id, cid)
        assert alice_platform.like_comment(video_id, cid).value == 2

    def test_like_unknown_comment(self, alice_platform, video_id):
        assert alice_platform.like_comment(video_id, 999).status is OpStatus.NOT_FOUND

    def test_like_unknown_video(self, alice_platform):
        assert alice_platform.like_comment(999, 1).status is OpStatus.NOT_FOUND

    def test_channel_owner_removes_any_comment(self, alice_platform, video_id):
        alice_platform.register("bob")
        alice_platform.login("bob")
        cid = alice_platform.comment(video_id, "Spam").id
        alice_platform.login("alice")
        assert alice_platform.remove_comment(video_id, cid).is_success
        assert alice_platform.list_comments(video_id).value == ()

    def test_author_removes_own_comment(self, alice_platform, video_id):
        alice_platform.register("bob")
        alice_platform.login("bob")
        cid = alice_platform.comment(video_id, "Oups").id
        assert alice_platform.remove_comment(video_id, cid).is_success

    def test_third_party_cannot_remove(self, alice_platform, video_id):
        cid = alice_platform.comment(video_id, "Mon avis").id
        alice_platform.register("carol")
        alice_platform.login("carol")
        result = alice_platform.remove_comment(video_id, cid)
        assert result.status is OpStatus.PERMISSION_DENIED
        assert [c.id for c in alice_platform.list_comments(video_id).value] == [cid]

    def test_remove_unknown_video(self, alice_platform):
        assert alice_platform.remove_comment(999, 1).status is OpStatus.NOT_FOUND


# ============================================================================
# Playlists
# ============================================================================


class TestPlaylists:
    """Tests pour create_playlist / add_to_playlist / play_playlist."""

    def test_create_playlist(self, alice_platform):
        assert alice_platform.create_playlist("favoris").is_success
        assert alice_platform.create_playlist("favoris").status is OpStatus.ALREADY_EXISTS

    def test_add_to_missing_playlist(self, alice_platform):
        video_id = alice_platform.upload("Vlogs", "Intro", 120).id
        result = alice_platform.add_to_playlist("absente", video_id)
        assert result.status is OpStatus.NOT_FOUND

    def test_add_unknown_video(self, alice_platform):
        alice_platform.create_playlist("favoris")
        assert alice_platform.add_to_playlist("favoris", 999).status is OpStatus.NOT_FOUND
        assert alice_platform.current_user.get_playlist("favoris").entries == ()

    def test_play_missing_playlist(self, alice_platform):
        assert alice_platform.play_playlist("absente").status is OpStatus.NOT_FOUND

    def test_play_playlist_plays_then_pauses_each_entry(self, alice_platform):
        first = alice_platform.upload("Vlogs", "Un", 10).value
        second = alice_platform.upload("Vlogs", "Deux", 10).value
        alice_platform.create_playlist("favoris")
        alice_platform.add_to_playlist("favoris", first.id)
        alice_platform.add_to_playlist("favoris", second.id)

        result = alice_platform.play_playlist("favoris")

        assert result.is_success
        assert result.value == [
            PlaylistEntry(1, first.id, "Un"),
            PlaylistEntry(2, second.id, "Deux"),
        ]
        assert (first.views, second.views) == (1, 1)
        assert not first.playing and not second.playing

    def test_play_playlist_with_active_video(self, alice_platform):
        """Une video deja en lecture n'est pas recomptee, puis se retrouve en pause."""
        video = alice_platform.upload("Vlogs", "Un", 10).value
        alice_platform.watch(video.id)
        alice_platform.create_playlist("favoris")
        alice_platform.add_to_playlist("favoris", video.id)

        alice_platform.play_playlist("favoris")

        assert video.views == 1
        assert video.playing is False

    def test_play_playlist_skips_dangling_ids(self, alice_platform):
        """Un id sans video dans la table est ignore a la lecture."""
        kept = alice_platform.upload("Vlogs", "Reste", 10).value
        alice_platform.create_playlist("favoris")
        playlist = alice_platform.current_user.get_playlist("favoris")
        playlist.add(kept.id, kept.title)
        playlist.add(12345, "Fantome")

        result = alice_platform.play_playlist("favoris")

        assert [e.video_id for e in result.value] == [kept.id]

    def test_duplicate_entries_played_in_order(self, alice_platform):
        video = alice_platform.upload("Vlogs", "Boucle", 10).value
        alice_platform.create_playlist("favoris")
        alice_platform.add_to_playlist("favoris", video.id)
        alice_platform.add_to_playlist("favoris", video.id)

        result = alice_platform.play_playlist("favoris")

        assert [e.position for e in result.value] == [1, 2]
        assert video.views == 2


# ============================================================================
# Recherche et listings
# ============================================================================


class TestSearchAndListing:
    """Tests pour search / list_videos."""

    def test_search_case_insensitive(self, alice_platform):
        alice_platform.upload("Vlogs", "Apprendre le C++", 10)
        alice_platform.upload("Vlogs", "Python", 10)
        result = alice_platform.search("c++")
        assert [v.title for v in result.value] == ["Apprendre le C++"]

    def test_search_anonymous(self, platform):
        assert platform.search("x").value == []

    def test_list_videos(self, alice_platform):
        alice_platform.upload("Vlogs", "Un", 10)
        alice_platform.upload("Vlogs", "Deux", 10)
        assert [v.title for v in alice_platform.list_videos().value] == ["Un", "Deux"]


class TestPerfLogging:
    """Tests pour la bascule de mesure de performance."""

    def test_toggle(self, platform: PlatformService):
        assert platform.perf_logging is False
        assert platform.toggle_perf_logging().value is True
        assert platform.toggle_perf_logging().value is False

    def test_operations_work_with_perf_logging(
        self, user_repo, channel_repo, id_generator
    ):
        service = PlatformService(
            users=user_repo,
            channels=channel_repo,
            videos=InMemoryVideoRepository(),
            id_generator=id_generator,
            perf_logging=True,
        )
        service.register("alice")
        service.login("alice")
        service.create_channel("Vlogs")
        video_id = service.upload("Vlogs", "Intro", 1).id
        assert service.watch(video_id).is_success
        assert service.search("intro").value
