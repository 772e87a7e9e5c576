"""member_scout.crawler: сетевой слой и цикл обхода каталога."""
