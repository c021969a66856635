from racketlon.match_session import MatchSession
from racketlon.messages import render_analysis, render_summary

session = MatchSession(player_a="Alice", player_b="Bruno")

# Table tennis: A
session.set_score("tabletennis", "21-15")

# Badminton: A
session.set_score("badminton", "21-15")

# Squash: A
result = session.set_score("squash", "21-15")

print("Before tennis:")
for line in render_summary(result) + render_analysis(result.analysis):
    print(line)

# Tennis: B wins 21-3 -> totals 66-66
result = session.set_score("tennis", "3-21")

print("\nAfter tennis:")
for line in render_summary(result) + render_analysis(result.analysis):
    print(line)
