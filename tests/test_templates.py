import pytest

from landing_agent.models import AdContent, Book, Feature, PageContent
from landing_agent.templates import (
    AnchorNotFoundError,
    add_route,
    add_search_ad,
    page_path,
    related_flag,
    render_page,
)

APP_TSX = """\
import { HashRouter, Routes, Route } from "react-router-dom";
import Fooble from "./pages/Fooble";
import Kids from "./pages/Kids";
import NotFound from "./pages/NotFound";

const App = () => (
      <HashRouter>
        <Routes>
          <Route path="/" element={<Fooble />} />
          <Route path="/kids" element={<Kids />} />
          {/* ADD ALL CUSTOM ROUTES ABOVE THE CATCH-ALL "*" ROUTE */}
          <Route path="*" element={<NotFound />} />
        </Routes>
      </HashRouter>
);

export default App;
"""

SEARCH_RESULTS_TSX = """\
const SearchResults = () => {
  const kidsKeywords = [
    "kids", "children", "family"
  ];

  const comparisonKeywords = [
    "nextory", "storytel", "vs"
  ];

  const isKidsRelated = kidsKeywords.some(keyword =>
    query.toLowerCase().includes(keyword.toLowerCase())
  );

  const isComparisonRelated = comparisonKeywords.some(keyword =>
    query.toLowerCase().includes(keyword.toLowerCase())
  );

  const hasResults = isKidsRelated || isComparisonRelated;

  return (
        {hasResults ? (
          <>
            {/* Sponsored Ad - Comparison */}
            {isComparisonRelated && (
              <div className="mb-6 p-4">
                <Link to="/comparison">Nextory vs Storytel</Link>
              </div>
            )}

            {/* Mock Search Results */}
          </>
        ) : null}
  );
};
"""

AD = AdContent(
    title="Best Romance Audiobooks 2025 - Unlimited Streaming",
    description="No credits, no limits. Start free today.",
)

# ---------------------------------------------------------------------------
# Page file
# ---------------------------------------------------------------------------


def _content() -> PageContent:
    return PageContent(
        title="Books That Hit Different",
        subtitle="Unlimited romance. One family plan.",
        adTitle="Best Romance Audiobooks 2025",
        adDescription="No credits, no limits.",
        heroGridTitle="Everyone's Reading These",
        features=[Feature(title="Read Anywhere", description="Offline downloads included.")],
        books=[Book(id=1, title="Beach Read", author="Emily Henry")],
    )


def test_render_page():
    source = render_page("Romance", _content())

    assert source.startswith('import Header from "@/components/Header";')
    assert "const Romance = () => {" in source
    assert source.rstrip().endswith("export default Romance;")
    assert "Books That Hit Different" in source
    assert "Everyone's Reading These" in source
    assert '"title": "Beach Read"' in source
    assert '"title": "Read Anywhere"' in source
    assert "alt={`${book.title} by ${book.author}`}" in source


def test_page_path(tmp_path):
    assert page_path(tmp_path, "Romance") == tmp_path / "src" / "pages" / "Romance.tsx"


# ---------------------------------------------------------------------------
# App.tsx
# ---------------------------------------------------------------------------


def test_add_route_inserts_import_and_route():
    updated = add_route(APP_TSX, "Romance", "/romance")

    import_line = 'import Romance from "./pages/Romance";'
    route_line = '          <Route path="/romance" element={<Romance />} />'
    assert updated.index('import NotFound from "./pages/NotFound";') < updated.index(import_line)
    assert updated.index('<Route path="/kids"') < updated.index(route_line)
    assert updated.index(route_line) < updated.index("{/* ADD ALL CUSTOM ROUTES")
    assert updated.index("{/* ADD ALL CUSTOM ROUTES") < updated.index('<Route path="*"')


def test_add_route_is_idempotent():
    once = add_route(APP_TSX, "Romance", "/romance")
    assert add_route(once, "Romance", "/romance") == once


def test_add_route_missing_import_anchor():
    source = APP_TSX.replace('import NotFound from "./pages/NotFound";\n', "")
    with pytest.raises(AnchorNotFoundError, match="App.tsx"):
        add_route(source, "Romance", "/romance")


def test_add_route_missing_catch_all_marker():
    source = APP_TSX.replace('          {/* ADD ALL CUSTOM ROUTES ABOVE THE CATCH-ALL "*" ROUTE */}\n', "")
    with pytest.raises(AnchorNotFoundError):
        add_route(source, "Romance", "/romance")


# ---------------------------------------------------------------------------
# SearchResults.tsx
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "variable_name, flag",
    [
        ("romanceKeywords", "isRomanceRelated"),
        ("thrillerAudiobooksKeywords", "isThrillerAudiobooksRelated"),
    ],
)
def test_related_flag(variable_name, flag):
    assert related_flag(variable_name) == flag


def test_add_search_ad():
    updated = add_search_ad(
        SEARCH_RESULTS_TSX, "romanceKeywords", ["romance", "romance audiobooks"], AD, "/romance"
    )

    assert updated.index("const comparisonKeywords") < updated.index("const romanceKeywords = [")
    assert '"romance audiobooks"' in updated
    assert updated.index("const isComparisonRelated") < updated.index(
        "const isRomanceRelated = romanceKeywords.some(keyword =>"
    )
    assert "const hasResults = isKidsRelated || isComparisonRelated || isRomanceRelated;" in updated
    assert "{/* Sponsored Ad - romance */}" in updated
    assert "{isRomanceRelated && (" in updated
    assert '<Link to="/romance" className="block hover:underline">' in updated
    assert "www.nextory.com/romance" in updated
    assert AD.title in updated
    assert updated.index("{isComparisonRelated && (") < updated.index("{isRomanceRelated && (")
    assert updated.index("{isRomanceRelated && (") < updated.index("{/* Mock Search Results */}")


@pytest.mark.parametrize(
    "anchor",
    [
        'const comparisonKeywords = [\n    "nextory", "storytel", "vs"\n  ];',
        "const isComparisonRelated = comparisonKeywords",
        "const hasResults = isKidsRelated || isComparisonRelated;",
        "{isComparisonRelated && (",
    ],
)
def test_add_search_ad_missing_anchor(anchor):
    source = SEARCH_RESULTS_TSX.replace(anchor, "")
    with pytest.raises(AnchorNotFoundError, match="SearchResults.tsx"):
        add_search_ad(source, "romanceKeywords", ["romance"], AD, "/romance")
