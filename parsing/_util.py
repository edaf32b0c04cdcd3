import fitz

from ._errors import DocumentOpenError, PageExtractionError


def open_document(path):
    try:
        return fitz.open(path)
    except Exception as e:
        raise DocumentOpenError(path, e) from e


def get_page_tokens(page):
    """Span texts of a page in reading order, stripped, empties dropped."""
    tokens = []
    ptext = page.get_text('dict')
    for block in ptext['blocks']:
        if 'lines' in block.keys():
            for line in block['lines']:
                for span in line['spans']:
                    data = span['text'].strip()
                    if data:
                        tokens.append(data)
    return tokens


def parse_file(doc):
    pages = []
    for p, page in enumerate(doc):
        try:
            pages.append(get_page_tokens(page))
        except Exception as e:
            raise PageExtractionError(p, e) from e

    return pages
