from responder.words import split_words


def test_split_words_lowercases_and_deduplicates():
    assert split_words("  My Windows  windows crash\n") == {"my", "windows", "crash"}


def test_blank_line_has_no_words():
    assert split_words("   \t") == set()
