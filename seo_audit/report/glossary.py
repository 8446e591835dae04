def build_glossary(keyword: str) -> dict[str, str]:
    """Explanations of every reported item, keyed like the results."""
    return {
        "title_tag": (
            "Specifies the title of the webpage. It is the most critical element "
            "displayed on the Search Engine Results Page (SERP). It should be between "
            "10 and 65 characters long."
        ),
        "meta_description": (
            "Provides a brief summary of the page content. It appears under the title "
            "on the SERP. While not a direct ranking factor, it significantly impacts "
            "the Click-Through Rate (CTR). The optimal length is between 50 and 160 "
            "characters."
        ),
        "h1_tag": (
            "Represents the main heading of the page. A page should have only one H1 "
            "tag, and it should accurately describe the page's primary topic."
        ),
        "image_alt_attribute": (
            "Describes the purpose of an image to search engines and visually impaired "
            "users. It should be present on relevant images for accessibility and "
            "image search optimization."
        ),
        "canonical_link": (
            'Informs search engines which URL is the "master" version of a page when '
            "duplicate content exists across multiple URLs. This helps consolidate "
            "link equity to the preferred page."
        ),
        "mobile_viewport": (
            "A meta tag that instructs the browser on how to adjust the page's "
            "dimensions and scaling on mobile devices. Mobile-friendliness is a "
            "recognized ranking factor."
        ),
        "min_word_count": (
            "The minimum number of words required for the content to be considered "
            "comprehensive. Longer content generally has a greater potential to rank "
            "well."
        ),
        "keyword_density": (
            f"The ratio of the target keyword ('{keyword}') to the total word count. "
            "Excessive density, known as keyword stuffing, can lead to search engine "
            "penalties."
        ),
        "file_size": (
            "The size of the page file in kilobytes. A smaller file improves page load "
            "speed and contributes to a better user experience."
        ),
    }
