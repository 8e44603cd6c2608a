from fastapi import Depends

from fileblog.db.file_store import get_file_store
from fileblog.repos.posts_repo import FilePostsRepo
from fileblog.services.posts_service import PostsService


def get_posts_repo(store=Depends(get_file_store)):
    return FilePostsRepo(store)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
