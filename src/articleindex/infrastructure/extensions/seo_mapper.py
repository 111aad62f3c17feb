"""SEO extension mapper."""

from typing import Any

from articleindex.domain.entities import SeoView


class DefaultSeoMapper:
    """Maps raw SEO data (camelCase keys as stored by the editor) to SeoView."""

    def map(self, data: dict[str, Any]) -> SeoView:
        return SeoView(
            title=data.get("title") or None,
            description=data.get("description") or None,
            keywords=data.get("keywords") or None,
            canonical_url=data.get("canonicalUrl") or None,
            no_index=bool(data.get("noIndex", False)),
            no_follow=bool(data.get("noFollow", False)),
            hide_in_sitemap=bool(data.get("hideInSitemap", False)),
        )
