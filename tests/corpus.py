"""Shared account ID corpus used by the validator, literal validator, and codec tests."""

OK_ACCOUNT_IDS = [
    "aa",
    "a-a",
    "a-aa",
    "100",
    "0o",
    "com",
    "near",
    "bowen",
    "b-o_w_e-n",
    "b.owen",
    "bro.wen",
    "a.ha",
    "a.b-a.ra",
    "system",
    "over.9000",
    "google.com",
    "illia.cheapaccounts.near",
    "0o0ooo00oo00o",
    "alex-skidanov",
    "10-4.8-2",
    "no_lols",
    "near.a",
    "1_4m_n0t-al1c3.near",
    # ETH-implicit
    "0xb794f5ea0ba39494ce839613fffba74279579268",
    # NEAR-implicit
    "0123456789012345678901234567890123456789012345678901234567890123",
]

BAD_ACCOUNT_IDS = [
    "a",
    "A",
    "Abc",
    "-near",
    "near-",
    "-near-",
    "near.",
    ".near",
    "near@",
    "@near",
    "неар",
    "@@@@@",
    "0__0",
    "0_-_0",
    "..",
    "a..near",
    "nEar",
    "_bowen",
    "hello world",
    "near\n",
    "ƒelicia.near",
    "abcdefghijklmnopqrstuvwxyz.abcdefghijklmnopqrstuvwxyz.abcdefghijklmnopqrstuvwxyz",
    "01234567890123456789012345678901234567890123456789012345678901234",
    # '@' separators are banned now
    "some-complex-address@gmail.com",
    "sub.buy_d1gitz@atata@b0-rg.c_0_m",
]
