"""
Keyword to hyperlink transform for article documents.
"""

import copy


class ArticleProcessor:
    """Wraps every occurrence of a keyword in an article's text elements in a link."""

    def __init__(self, keyword: str = "Google", url: str = "https://www.google.com/"):
        if not keyword:
            raise ValueError("keyword must not be empty")
        self.keyword = keyword
        self.url = url

    @property
    def link_markup(self) -> str:
        return f'<a href="{self.url}" target="_blank">{self.keyword}</a>'

    def replace_keyword_with_hyperlink(self, content: str) -> str:
        """Replace all case-sensitive occurrences of the keyword with the link markup."""
        return content.replace(self.keyword, self.link_markup)

    def process_article(self, article: dict) -> dict:
        """
        Return a copy of ``article`` with the keyword linked in its text elements.

        Only elements of type ``text`` with non-empty string content are
        changed. The input article is left untouched.
        """
        processed = copy.deepcopy(article)
        if not isinstance(processed, dict):
            return processed

        elements = processed.get("content_elements")
        if isinstance(elements, list):
            processed["content_elements"] = [self._process_element(el) for el in elements]

        return processed

    def _process_element(self, element):
        if not isinstance(element, dict) or element.get("type") != "text":
            return element
        content = element.get("content")
        if not content or not isinstance(content, str):
            return element
        return {**element, "content": self.replace_keyword_with_hyperlink(content)}
