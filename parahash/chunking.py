PARAGRAPH_BREAK = "\n\n"

# Unicode White_Space; str.strip() would also drop the \x1c-\x1f separators
TRIM_CHARS = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

def split_paragraphs(text: str) -> list[str]:
    # a paragraph is text followed by a blank line; only the literal "\n\n" counts
    paras = (p.strip(TRIM_CHARS) for p in text.split(PARAGRAPH_BREAK))
    return [p for p in paras if p]
