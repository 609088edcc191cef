#!/usr/bin/env python3
"""
Setup script for the word breaker.
Prepares a word dictionary (dictionary.txt) next to this script.
"""

import os
import urllib.request

SYSTEM_DICT = '/usr/share/dict/words'

DICTIONARY_URLS = [
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt",
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]

DEFAULT_DICT_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt')


def clean_words(lines):
    """Lowercase alphabetic words from an iterable of lines."""
    words = set()
    for line in lines:
        for token in line.split():
            word = token.strip().lower()
            if word.isascii() and word.isalpha():
                words.add(word)
    return words


def write_words(words, dict_path):
    with open(dict_path, 'w', encoding='utf-8') as f:
        for word in sorted(words):
            f.write(word + '\n')


def download_dictionary(dict_path=DEFAULT_DICT_PATH, system_dict=SYSTEM_DICT, urls=DICTIONARY_URLS):
    """Write a word dictionary to *dict_path*.  Returns True when one is in place."""
    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    print("Preparing word dictionary...")

    if system_dict and os.path.exists(system_dict):
        print(f"  Using system dictionary: {system_dict}")
        with open(system_dict, encoding='utf-8', errors='ignore') as f:
            words = clean_words(f)
        write_words(words, dict_path)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return True

    for url in urls:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                text = resp.read().decode('utf-8', errors='ignore')
        except OSError as e:
            print(f"  Failed: {e}")
            continue
        words = clean_words(text.splitlines())
        write_words(words, dict_path)
        print(f"✓ Dictionary downloaded: {len(words):,} words")
        return True

    print("\n⚠ Could not prepare a dictionary automatically.")
    print("  Please download an English word list and save it as:")
    print(f"  {dict_path}")
    print("\n  You can find word lists at:")
    print("  - https://github.com/dwyl/english-words")
    print("  - http://www-01.sil.org/linguistics/wordlists/english/wordlist/wordsEn.txt")
    return False


def main():
    print("=" * 50)
    print("  Word Breaker — Setup")
    print("=" * 50)
    print()

    ok = download_dictionary()

    print()
    print("=" * 50)
    if ok:
        print("  Setup complete! Run the word breaker:")
        print()
        print("    python break_sentence.py            # interactive")
        print("    python break_sentence.py --join < file.txt")
    else:
        print("  Setup incomplete -- see above.")
    print("=" * 50)


if __name__ == '__main__':
    main()
