# Data models: Product, Category, SortKey, FilterCriteria
