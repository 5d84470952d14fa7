"""
Errors raised when BIP-85 derivation parameters are rejected
"""


class Bip85Error(ValueError):
    """Base class for rejected derivation parameters"""


class InvalidIndex(Bip85Error):
    def __init__(self, index):
        self.index = index
        super().__init__(
            f"invalid index for derivation, should be less than 0x80000000: {index}"
        )


class InvalidLength(Bip85Error):
    def __init__(self, length):
        self.length = length
        super().__init__(f"invalid bytes length: {length}. Should be between 16 and 64")


class InvalidWordCount(Bip85Error):
    def __init__(self, word_count):
        self.word_count = word_count
        super().__init__(
            f"invalid number of words for mnemonic: {word_count}. Should be 12, 18 or 24"
        )


class InvalidLanguage(Bip85Error):
    def __init__(self, language):
        self.language = language
        super().__init__(f"unknown mnemonic language code: {language}")
