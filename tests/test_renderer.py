import pytest

from sitesmith.collection import Page
from sitesmith.exceptions import LayoutNotFoundError, RenderError
from sitesmith.renderer import JinjaRenderer


@pytest.fixture
def layouts(tmp_path):
    site = tmp_path / 'layouts'
    theme = tmp_path / 'theme'
    for path, content in {
        site / 'one.html': "site {{ value }}",
        theme / 'one.html': "theme {{ value }}",
        theme / 'two.html': "theme two {{ url('/a/') }}",
        site / 'broken.html': "{% for %}",
        site / 'escape.html': "{{ value }}",
        site / 'raise.html': "{{ value.missing.deeper }}",
    }.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return [site, theme, tmp_path / 'missing']


class TestJinjaRenderer:
    """Tests for the Jinja2 renderer."""

    def test_lookup_order(self, layouts):
        renderer = JinjaRenderer(layouts, baseurl='https://example.com/')
        assert renderer.render('one.html', {'value': 1}) == 'site 1'
        assert renderer.render('two.html', {}) == 'theme two https://example.com/a/'

    def test_packaged_layouts(self, layouts):
        renderer = JinjaRenderer(layouts)
        assert renderer.has_template('_default/page.html')
        assert renderer.has_template('sitemap.xml')
        assert not renderer.has_template('nope.html')
        html = renderer.render('_default/page.html', {
            'page': Page(id='x', html='<p>hi</p>', variables={'title': 'X'}),
            'site': {'title': ''},
            'menus': None,
        })
        assert '<p>hi</p>' in html
        assert '<h1>X</h1>' in html

    def test_url(self, layouts):
        renderer = JinjaRenderer(layouts, baseurl='https://example.com/sub/')
        assert renderer.url('/page/') == 'https://example.com/sub/page/'
        assert renderer.url('page') == 'https://example.com/sub/page'
        assert renderer.url('https://other.org/') == 'https://other.org/'
        assert JinjaRenderer(layouts).url('/') == '/'

    def test_autoescape(self, layouts):
        renderer = JinjaRenderer(layouts)
        assert renderer.render('escape.html', {'value': '<b>'}) == '&lt;b&gt;'

    def test_globals(self, layouts):
        renderer = JinjaRenderer(layouts)
        renderer.add_global('value', 'global')
        assert renderer.render('one.html', {}) == 'site global'

    def test_missing_template(self, layouts):
        with pytest.raises(LayoutNotFoundError):
            JinjaRenderer(layouts).render('nope.html', {})

    def test_template_errors(self, layouts):
        renderer = JinjaRenderer(layouts)
        with pytest.raises(RenderError):
            renderer.render('broken.html', {})
        with pytest.raises(RenderError):
            renderer.render('raise.html', {'value': None})
