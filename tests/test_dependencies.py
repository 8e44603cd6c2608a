from fileblog.dependencies import get_posts_repo, get_posts_service
from fileblog.repos.posts_repo import FilePostsRepo
from fileblog.services.posts_service import PostsService
from tests.conftest import FakeFileStore


def test_get_posts_repo_constructs_repo():
    store = FakeFileStore()
    repo = get_posts_repo(store=store)

    assert isinstance(repo, FilePostsRepo)
    assert repo.store is store


def test_get_posts_service_constructs_service():
    repo = FilePostsRepo(FakeFileStore())
    svc = get_posts_service(repo=repo)

    assert isinstance(svc, PostsService)
    assert svc.repo is repo
