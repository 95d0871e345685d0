"""Back-office repositories and use cases: catalogs, items, balances, moods and accounts."""