# %% [markdown]
# # hotfuzz: Quickstart
#
# **From typos to voice commands** - comparing strings and finding phrases
#
# ---
#
# ## The Problem
#
# A user types into a search box or speaks a command. The words are close to
# what the application knows, but not quite:
#
# ```
# "acess"                vs  "access"
# "update windos"        in  "open the window update settings"
# "best performance"     in  "power mode better performance"
# "설정"                 in  "블루투스 설정 열기"
# ```
#
# **hotfuzz** scores how alike two strings are and finds where a short pattern
# best matches inside a longer text, including Chinese, Japanese and Korean.
#
# ---
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | Comparing | ratio with explicit methods, smart_ratio |
# | 2 | Searching | Bitap, token search, CJK search, smart_search |
# | 3 | Lists | best_matches over a list of commands |
# | 4 | Polars | The .fuzzy expression namespace |

# %%
import polars as pl

import hotfuzz as hf
from hotfuzz import RatioMethod, SearchMethod

# %% [markdown]
# ---
# ## Part 1: Comparing
#
# Every comparison returns a `FuzzyResult`: a 0-100 `ratio`, the raw `metric`
# (an edit distance) and the span of the match in the target.

# %%
pairs = [
    ("this is a test", "this is a Test", RatioMethod.LEVENSHTEIN),
    ("this is a test", "this is a tset", RatioMethod.OSA),
    ("battery better", "better battery", RatioMethod.TOKEN_SORT),
    ("HSINCHUANG", "SINJHUANG DISTRICT", RatioMethod.PARTIAL),
]

for source, target, method in pairs:
    result = hf.ratio(source, target, method)
    print(f"{method.value:>12}: {source!r} vs {target!r} -> ratio {result.ratio:.1f}, metric {result.metric}")

# %% [markdown]
# Not sure which method to use? `smart_ratio` looks at the token sequences and
# the length ratio of the two strings and picks one.

# %%
result = hf.smart_ratio("update windos", "open the window update settings")
print(f"smart_ratio used {result.distance_function}: {result.ratio:.1f}")

# %% [markdown]
# ---
# ## Part 2: Searching
#
# `search` finds where a pattern best matches. `smart_search` chooses Bitap
# for single short words, token search for phrases and CJK search for
# logographic text.

# %%
result = hf.search("spank", "bitbit spunky", SearchMethod.BITAP)
print(f"Bitap: {result.matched!r} at {result.start}, {result.metric} substitution(s)")

for phrase, utterance in [
    ("best performance", "power mode better performance"),
    ("설정", "블루투스 설정 열기"),
    ("投影模式", "打开投影模式设置"),
]:
    result = hf.smart_search(phrase, utterance)
    print(f"{phrase!r} in {utterance!r} -> {result.matched!r} [{result.start}:{result.end}]")

# %% [markdown]
# The heuristic entry points never raise. A failed search gives a no-result
# whose `distance_function` says why.

# %%
result = hf.smart_search("alarm and clock", "alarm  clock")
print(result.is_no_result, result.distance_function)

# %% [markdown]
# ---
# ## Part 3: Lists

# %%
apps = ["access", "alarms & clock", "calculator", "snip & sketch", "word"]

for query in ["acess", "world", "sketch and snip"]:
    best = hf.batch.best_matches(apps, query, method="partial_token_sort", limit=1)[0]
    print(f"{query!r} -> {best.target!r} ({best.ratio:.1f})")

# %% [markdown]
# ---
# ## Part 4: Polars
#
# Importing hotfuzz registers a `.fuzzy` namespace on Polars expressions.

# %%
df = pl.DataFrame({"utterance": ["acess", "world", "open calculater"]})

print(
    df.with_columns(
        app=pl.col("utterance").fuzzy.best_match(apps, method="partial_token_sort"),
        cjk=pl.col("utterance").fuzzy.is_cjk(),
    )
)
