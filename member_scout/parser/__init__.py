"""member_scout.parser: разбор HTML карточек участников."""
