# templates.py
# Text templating for the React site the agent edits.
#
# render_page() produces a whole new page file. add_route() and
# add_search_ad() insert snippets into existing files at the anchors below.
# Target files are treated as opaque text; a missing anchor is an error,
# never a silent no-op.

import json
import re
from pathlib import Path
from string import Template

from landing_agent.models import AdContent, PageContent


class AnchorNotFoundError(Exception):
    """Raised when a target file lacks the text an insertion is anchored to."""


# ---------------------------------------------------------------------------
# Anchors
# ---------------------------------------------------------------------------

# App.tsx
NOT_FOUND_IMPORT = re.compile(r'import NotFound from "\./pages/NotFound";')
CATCH_ALL_MARKER = re.compile(r'\s+\{/\* ADD ALL CUSTOM ROUTES ABOVE THE CATCH-ALL "\*" ROUTE \*/\}')

# SearchResults.tsx
COMPARISON_KEYWORDS = re.compile(r"const comparisonKeywords = \[[\s\S]*?\];")
COMPARISON_FLAG = re.compile(r"const isComparisonRelated = comparisonKeywords[\s\S]*?\);")
HAS_RESULTS = re.compile(r"const hasResults = ([^;]+);")
COMPARISON_AD = re.compile(r"\{isComparisonRelated && \([\s\S]*?\)\}")


def _insert_after(pattern: re.Pattern, source: str, snippet: str, target: str) -> str:
    match = pattern.search(source)
    if match is None:
        raise AnchorNotFoundError(f"Anchor {pattern.pattern!r} not found in {target}.")
    return source[: match.end()] + snippet + source[match.end() :]


# ---------------------------------------------------------------------------
# Page file
# ---------------------------------------------------------------------------

_PAGE_TEMPLATE = Template("""\
import Header from "@/components/Header";
import { Button } from "@/components/ui/button";
import { Card } from "@/components/ui/card";

interface Book {
  id: number;
  title: string;
  author: string;
  cover: string;
}

const $page_name = () => {
  const books: Book[] = $books;

  const features = $features;

  return (
    <div className="min-h-screen bg-background">
      <Header />
      <main>
        {/* Hero Section */}
        <section className="py-20 px-4 text-center bg-gradient-to-b from-primary/10 to-background">
          <div className="container mx-auto">
            <h1 className="text-4xl md:text-6xl font-bold mb-6 text-foreground">
              $title
            </h1>
            <p className="text-xl md:text-2xl text-muted-foreground mb-8 max-w-3xl mx-auto">
              $subtitle
            </p>
            <Button size="lg" className="text-lg px-8 py-6">
              Start Free 30-Day Trial
            </Button>
          </div>
        </section>

        {/* Features Section */}
        <section className="py-16 px-4 bg-muted/30">
          <div className="container mx-auto">
            <h2 className="text-3xl md:text-4xl font-bold mb-12 text-center">
              Why Choose Nextory
            </h2>
            <div className="grid grid-cols-1 md:grid-cols-3 gap-8">
              {features.map((feature: any, idx: number) => (
                <Card key={idx} className="p-6 text-center hover:shadow-lg transition-shadow">
                  <h3 className="text-xl font-semibold mb-3">{feature.title}</h3>
                  <p className="text-muted-foreground">{feature.description}</p>
                </Card>
              ))}
            </div>
          </div>
        </section>

        {/* Books Grid Section */}
        <section className="py-16 px-4">
          <div className="container mx-auto">
            <h2 className="text-3xl md:text-4xl font-bold mb-12 text-center">
              $hero_grid_title
            </h2>
            <div className="grid grid-cols-2 sm:grid-cols-3 md:grid-cols-4 lg:grid-cols-6 gap-4 md:gap-6">
              {books.map((book, idx) => (
                <Card
                  key={book.id ?? idx}
                  className="bg-card border-border/50 overflow-hidden hover:scale-105 transition-transform duration-300 cursor-pointer group"
                >
                  <div className="aspect-[2/3] relative overflow-hidden">
                    <img
                      src={book.cover}
                      alt={`$${book.title} by $${book.author}`}
                      className="w-full h-full object-cover group-hover:opacity-90 transition-opacity"
                    />
                  </div>
                  <div className="p-3">
                    <h3 className="font-semibold text-sm mb-1 line-clamp-2">
                      {book.title}
                    </h3>
                    <p className="text-xs text-muted-foreground line-clamp-1">
                      {book.author}
                    </p>
                  </div>
                </Card>
              ))}
            </div>
          </div>
        </section>

        {/* CTA Section */}
        <section className="py-20 px-4 bg-primary text-primary-foreground text-center">
          <div className="container mx-auto">
            <h2 className="text-3xl md:text-5xl font-bold mb-6">
              Ready to Start Listening?
            </h2>
            <p className="text-xl mb-8 opacity-90">
              Join thousands of readers enjoying unlimited audiobooks and e-books
            </p>
            <Button size="lg" variant="secondary" className="text-lg px-8 py-6">
              Try Free for 30 Days
            </Button>
          </div>
        </section>
      </main>
    </div>
  );
};

export default $page_name;
""")


def _js_literal(value) -> str:
    return json.dumps(value, indent=4, ensure_ascii=False)


def render_page(page_name: str, content: PageContent) -> str:
    return _PAGE_TEMPLATE.substitute(
        page_name=page_name,
        books=_js_literal([book.model_dump() for book in content.books]),
        features=_js_literal([feature.model_dump() for feature in content.features]),
        title=content.title,
        subtitle=content.subtitle,
        hero_grid_title=content.heroGridTitle,
    )


def page_path(root: Path, page_name: str) -> Path:
    return root / "src" / "pages" / f"{page_name}.tsx"


# ---------------------------------------------------------------------------
# App.tsx
# ---------------------------------------------------------------------------


def add_route(source: str, page_name: str, route_path: str) -> str:
    """Register `page_name` at `route_path`. Lines already present are left alone."""
    import_line = f'import {page_name} from "./pages/{page_name}";'
    if import_line not in source:
        source = _insert_after(NOT_FOUND_IMPORT, source, f"\n{import_line}", "App.tsx")

    route_line = f'          <Route path="{route_path}" element={{<{page_name} />}} />'
    if route_line not in source:
        match = CATCH_ALL_MARKER.search(source)
        if match is None:
            raise AnchorNotFoundError(
                f"Anchor {CATCH_ALL_MARKER.pattern!r} not found in App.tsx."
            )
        replacement = (
            f"\n{route_line}\n"
            '          {/* ADD ALL CUSTOM ROUTES ABOVE THE CATCH-ALL "*" ROUTE */}'
        )
        source = source[: match.start()] + replacement + source[match.end() :]

    return source


# ---------------------------------------------------------------------------
# SearchResults.tsx
# ---------------------------------------------------------------------------


def related_flag(variable_name: str) -> str:
    """romanceKeywords -> isRomanceRelated"""
    stem = variable_name.replace("Keywords", "Related")
    return f"is{stem[:1].upper()}{stem[1:]}"


_AD_TEMPLATE = Template("""
            {/* Sponsored Ad - $label */}
            {$flag && (
              <div className="mb-6 p-4 border-l-4 border-blue-600 bg-blue-50 rounded-md">
                <div className="flex items-center gap-2 mb-2">
                  <span className="text-xs font-semibold px-2 py-0.5 bg-white border border-gray-300 rounded">Ad</span>
                </div>
                <Link to="$route_path" className="block hover:underline">
                  <h3 className="text-xl text-blue-700 font-medium mb-1">
                    $title
                  </h3>
                  <p className="text-sm text-green-700 mb-2">www.nextory.com$route_path</p>
                  <p className="text-sm text-gray-700">
                    $description
                  </p>
                </Link>
              </div>
            )}
""")


def add_search_ad(
    source: str,
    variable_name: str,
    keywords: list[str],
    ad: AdContent,
    route_path: str,
) -> str:
    """Add a keyword list, its match flag and a sponsored ad to SearchResults.tsx."""
    flag = related_flag(variable_name)
    target = "SearchResults.tsx"

    keywords_code = f"\n\n  const {variable_name} = {_js_literal(keywords)};\n"
    source = _insert_after(COMPARISON_KEYWORDS, source, keywords_code, target)

    matching_code = (
        f"\n\n  const {flag} = {variable_name}.some(keyword => \n"
        "    query.toLowerCase().includes(keyword.toLowerCase())\n"
        "  );\n"
    )
    source = _insert_after(COMPARISON_FLAG, source, matching_code, target)

    match = HAS_RESULTS.search(source)
    if match is None:
        raise AnchorNotFoundError(f"Anchor {HAS_RESULTS.pattern!r} not found in {target}.")
    has_results = f"const hasResults = {match.group(1)} || {flag};"
    source = source[: match.start()] + has_results + source[match.end() :]

    ad_code = _AD_TEMPLATE.substitute(
        label=variable_name.replace("Keywords", ""),
        flag=flag,
        route_path=route_path,
        title=ad.title,
        description=ad.description,
    )
    return _insert_after(COMPARISON_AD, source, ad_code, target)
