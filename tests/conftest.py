import pytest
import yaml
from pathlib import Path


SITE_CONFIG = {
    'title': 'Test Site',
    'baseurl': 'https://example.com/',
    'taxonomies': {'tags': 'tag'},
    'menus': {
        'main': [
            {'id': 'home', 'name': 'Home', 'url': '/', 'weight': 0},
        ],
    },
}

SITE_FILES = {
    'pages/index.md': "---\ntitle: Home\n---\nWelcome\n",
    'pages/blog/post.md': (
        "---\n"
        "title: Post\n"
        "tags: [Python, Static Sites]\n"
        "menu: main\n"
        "aliases: [old-post]\n"
        "---\n"
        "# Hello\n\nSome text.\n"
    ),
    'pages/draft.md': "---\ntitle: Draft\ndraft: true\n---\nWork in progress\n",
    'pages/broken.md': "---\ntitle: [unclosed\n---\nBroken\n",
    'data/authors/jane.yml': "name: Jane\n",
    'static/css/style.css': "body {  color : red ; }\n",
}


def write_site(root: Path, config: dict, files: dict) -> Path:
    """Write a site tree below `root` and return its config file."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    config_file = root / 'sitesmith.yml'
    with open(config_file, 'w') as f:
        yaml.dump(config, f)
    return config_file


@pytest.fixture
def make_site(tmp_path: Path):
    """A pytest fixture creating a site; config and files extend the sample site."""
    def _make_site(config: dict = None, files: dict = None) -> Path:
        site_config = dict(SITE_CONFIG)
        site_config.update(config or {})
        site_files = dict(SITE_FILES)
        site_files.update(files or {})
        return write_site(tmp_path / 'site', site_config, site_files)
    return _make_site
