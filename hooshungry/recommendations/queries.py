RECOMMEND_QUERY = """
query Recommend($hallId: Int!, $prefs: PreferenceInput!, $limit: Int) {
  recommend(hallId: $hallId, prefs: $prefs, limit: $limit) {
    id
    name
    calories
    vegan
    vegetarian
    popularityScore
    score
  }
}
"""

DINING_HALLS_QUERY = """
query DiningHalls($query: String) {
  diningHalls(query: $query) {
    id
    name
    lat
    lon
    cuisine
    openingHours
  }
}
"""
