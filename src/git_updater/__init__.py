"""git-updater - commit single-file changes to GitHub and GitLab repositories."""


def get_container():
    from .container import get_container as _get_container

    return _get_container()


__all__ = ["get_container"]
