import threading

from music_queue.i18n import Language, Translator
from music_queue.i18n.markup import COLOR_TAGS, RESET


def test_get(translator: Translator):
    assert translator.get("greeting") == "Hello {}!"


def test_get_with_args(translator: Translator):
    assert translator.get_with_args("greeting", "Anna") == "Hello Anna!"
    assert translator.t("pair", 1, 2.5) == "1 and 2.5"


def test_switch_language(translator: Translator):
    translator.switch_language(Language.HUNGARIAN)

    assert translator.language == Language.HUNGARIAN
    assert translator.t("greeting", "Anna") == "Szia Anna!"
    assert translator.get("only_english") == "English only"


def test_initialize(translator: Translator):
    translator.initialize(Language.HUNGARIAN)
    assert translator.get("greeting") == "Szia {}!"


def test_coloring(translator: Translator):
    assert translator.get("only_english") == "English only"

    translator.set_coloring(True)

    assert translator.coloring
    assert translator.get("only_english") == (
        RESET + COLOR_TAGS["b"] + "English only" + RESET
    )


def test_unknown_key(translator: Translator):
    assert translator.get("missing_key") == "missing_key"


def test_independent_contexts(catalog):
    english = Translator(catalog, Language.ENGLISH)
    hungarian = Translator(catalog, Language.HUNGARIAN, coloring=True)

    assert english.get("greeting") == "Hello {}!"
    assert hungarian.get("greeting") == RESET + "Szia {}!"


def test_concurrent_switches(translator: Translator):
    results: list[str] = []

    def worker(language: Language):
        for _ in range(200):
            translator.switch_language(language)
            results.append(translator.get("greeting"))

    threads = [
        threading.Thread(target=worker, args=(language,)) for language in Language
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 200 * len(Language)
    assert set(results) <= {"Hello {}!", "Szia {}!"}
