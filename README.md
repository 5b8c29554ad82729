# cyberkit

Building blocks for natural-language-processing pipelines, in plain Python
with no runtime dependencies.

## What is inside

- `cyberkit.config` describes where a model lives and how it should be
  obtained. It has the `DownloadPolicy`, `ConversionPolicy` and
  `FloatPrecision` enums, and a `Config` dataclass with `full_model_path()`.
  It also has the parsers `parse_download_policy` (`"missing"`, `"always"`,
  `"never"`), `parse_conversion_policy` (the same words) and
  `parse_float_precision` (`"32"`, `"64"`). These raise `ValueError` on any
  other value.
- `cyberkit.tokenizers` has `BaseTokenizer`. It splits text on whitespace and
  punctuation, but not on the hyphen, and keeps each token's character
  offsets (`StringOffsetsPair`, `Offsets`). Words passed as `special_words`
  are kept whole. `get_strings`, `get_offsets`, `is_whitespace` and
  `is_punctuation` are available too.
- `cyberkit.vocabulary` has `Vocabulary`, which gives terms consecutive IDs
  in the order they are first added.
  - Look-ups: `id`, `must_id`, `term`, `must_term`, `longest_prefix`.
  - `size()` returns the highest ID assigned, not the number of terms, and
    `term()` only looks up IDs below it. The number of terms is `len()`.
  - `vocabulary_from_file` reads one term per line.
  - `to_bytes` and `vocabulary_from_bytes` serialise a vocabulary and read it
    back.
- `cyberkit.sliceutils` has three containers:
  - `IndexedSlice` is sorted stably while it keeps track of each value's
    original index.
  - `OrderedHeap` is the backing list of a min-heap.
  - `ReverseHeap` is a view of another heap with its ordering reversed.
- `cyberkit.sentencepiece` has `SentencePiece`, a unigram segmenter over a
  trie of scored pieces.
  - `insert`, `set_control_word`, `control_word`, `tokenize` and
    `tokenize_to_ids` build and use the segmenter.
  - `normalize` removes control characters, maps whitespace to spaces and
    applies NFKC. `is_control` tells which characters `normalize` removes.
  - `detokenize` turns word-start markers (`▁`) back into spaces.
- The task modules hold result types, `InputSequenceTooLongError` and
  post-processing helpers:
  - `cyberkit.textclassification`: `softmax`, `rank_labels`,
    `filter_response`, `id_to_label`, `Response`, `EncodingResponse`.
  - `cyberkit.tokenclassification`: `aggregate` merges IOB, BIOES and BILOU
    tags into entities. It also has `filter_not_entities`, `strip_prefix`,
    `extract_prefix`, `id_to_label`, `AggregationStrategy`, `Parameters`,
    `Token` and `Response`.
  - `cyberkit.zeroshotclassifier`: `Parameters.hypotheses()`,
    `Parameters.is_multi_class()`, `pad_token_ids` and `Response`.
  - `cyberkit.languagemodeling`: `select_top_k`, `pad`, `Parameters`,
    `Token`, `Response` and `IndexScorePair`.
  - `cyberkit.questionanswering`:
    - `Options.with_defaults()` fills in unset options.
    - Helpers: `passage_logits`, `best_indices`, `search_candidates`,
      `filter_unlikely_candidates`, `rank_answers`.
    - Types: `Answer` and `Response`.
  - `cyberkit.textgeneration`:
    - `Options` holds the generation settings; `default_options` and
      `default_options_for_text_paraphrasing` return preset ones.
    - `default_model_for_machine_translation` gives a translation model
      name.
    - Helpers: `prepare_input_for_abstractive_question_answering`,
      `strip_special_tokens`, `wrap_bos_eos`.
    - `Response` holds the generated texts and scores.

## Installation

```
pip install cyberkit
```

## Examples

Tokenize a sentence:

```python
from cyberkit.tokenizers import BaseTokenizer, get_strings

tokens = BaseTokenizer().tokenize("Hey friend! How are you?")
print(get_strings(tokens))
# ['Hey', 'friend', '!', 'How', 'are', 'you', '?']
```

Group named-entity tags into spans:

```python
from cyberkit.tokenclassification import Token, aggregate

spans = aggregate([
    Token(text="New", start=0, end=3, label="B-LOC"),
    Token(text="York", start=4, end=8, label="I-LOC"),
])
# [Token(text='New York', start=0, end=8, label='LOC', score=0.0)]
```

Segment text with SentencePiece:

```python
from cyberkit.sentencepiece import SentencePiece

sp = SentencePiece()
sp.insert("▁hello", -1.0, 5)
print(sp.tokenize("hello"))
# [Token(id=5, text='▁hello')]
```

## What this package does not do

- It runs no neural networks. Classification, encoding, generation and
  question answering are covered only by their result types and by the steps
  before and after a model is run.
- It does not download, convert or load model weights. `Config` and its
  policies only describe those choices.
- It does not read SentencePiece model files or BPE vocabulary and merge
  files. A `SentencePiece` is filled in by calling `insert` and
  `set_control_word`.
- It provides no command-line tool and no server.

## Running the tests

```
pip install -e ".[test]"
pytest
```