"""Recommendation engine: context-driven clothing, food, experience and photo suggestions.

Modules:
    config            Enumerations and thresholds
    domain            Trip, preferences, context, item and result data structures
    errors            Caller-contract errors
    context_builder   Season, time-of-day, weather and safety posture for one request
    rules             Rule groups, destination tables and the exclusion-rule filter
    base              Shared candidate -> filter -> summarize pipeline
    clothing          Clothing recommender
    food              Food recommender
    experience        Experience recommender
    photo             Photo spot and social tip recommender
    notifications     Advisory notices derived from the context
    orchestrator      Builds the context once and assembles the envelope

Pipeline:
    ContextBuilder.build → {Clothing, Food, Experience, Photo}Recommender.recommend
    → derive_notifications → RecommendationResult
"""
