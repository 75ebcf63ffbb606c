"""Given-name and surname corpora.

The pools are curated, hard coded lists so that they can be embedded directly
in the source tree.  Traditionally masculine, feminine and neutral given names
are mixed together; surnames are drawn from public census tables with a few
very short names added so that tight length budgets still have candidates.
All values are plain ASCII.
"""

from __future__ import annotations

__all__ = ["FIRST_NAMES", "LAST_NAMES"]

_NEUTRAL_GIVEN_NAMES = """
Al Bo Jo Ty Ed Ari Ash Kai Lee Sam Val Alex Dana Drew Jess Noel Remy Sage Tate
Taylor Jordan Morgan Casey Jamie Riley Avery Cameron Devin Sydney Terry Quinn
Reese Peyton Rowan Hayden Skyler Corey Robin Jesse Leslie Tracy Kerry Logan
Frankie Harley Blair Phoenix River Kendall Bailey Emerson Finley Hunter Parker
Dakota Adrian Charlie Jackie Addison Ainsley Amari Angel Ariel Ashton Aubrey
Brooklyn Cadence Carson Chandler Delaney Eden Elliot Hadley Harper Haven Hollis
Jaden Justice Karter Keegan Kelsey Kenzie Lennon London Lyric Marion Milan
Monroe Oakley Presley Reagan Shiloh Sky Tatum Teagan Tristan Wesley Winter
""".split()

_MALE_NAMES = """
James John Robert Michael William David Richard Joseph Thomas Charles
Christopher Daniel Matthew Anthony Mark Donald Steven Paul Andrew Joshua
Kenneth Kevin Brian George Timothy Ronald Edward Jason Jeffrey Ryan Jacob
Gary Nicholas Eric Stephen Jonathan Larry Justin Scott Brandon Benjamin
Samuel Frank Gregory Raymond Alexander Patrick Jack Dennis Jerry Tyler Aaron
Jose Henry Adam Douglas Nathan Peter Zachary Kyle Walter Harold Jeremy Ethan
Carl Keith Roger Gerald Christian Sean Arthur Austin Noah Joe Bryan Billy
Albert Dylan Bruce Will Gabriel Alan Juan Wayne Roy Ralph Randy Eugene Carlos
Russell Louis Bobby Victor Martin Ernest Phillip Craig
""".split()

_FEMALE_NAMES = """
Mary Patricia Jennifer Linda Elizabeth Barbara Susan Jessica Sarah Karen
Nancy Lisa Margaret Betty Sandra Ashley Dorothy Kimberly Emily Donna
Michelle Carol Amanda Melissa Deborah Stephanie Rebecca Laura Sharon
Cynthia Kathleen Amy Shirley Angela Helen Anna Brenda Pamela Nicole Emma
Samantha Katherine Christine Debra Rachel Carolyn Janet Catherine Maria
Heather Diane Ruth Julie Olivia Joyce Virginia Victoria Kelly Christina
Lauren Joan Evelyn Judith Megan Cheryl Andrea Hannah Jacqueline Ann Jean
Alice Gloria Kathryn Teresa Doris Sara Janice Julia Marie Grace Judy
Theresa Beverly Denise Marilyn Amber Madison Danielle Brittany Diana Natalie
Sophia Alexis Kayla Ruby Brooke Ella Lily Mia Stella Eve Ivy Zoe
""".split()

FIRST_NAMES: tuple[str, ...] = tuple(_NEUTRAL_GIVEN_NAMES + _MALE_NAMES + _FEMALE_NAMES)

LAST_NAMES: tuple[str, ...] = tuple(
    """
Li Wu Ng Ho Yu Lee Kim Fox Ray Cox Day Poe Orr Ash
Smith Johnson Williams Brown Jones Garcia Miller Davis Rodriguez Martinez
Hernandez Lopez Gonzalez Wilson Anderson Thomas Taylor Moore Jackson Martin
Perez Thompson White Harris Sanchez Clark Ramirez Lewis Robinson Walker
Young Allen King Wright Scott Torres Nguyen Hill Flores Green Adams Nelson
Baker Hall Rivera Campbell Mitchell Carter Roberts Gomez Phillips Evans
Turner Diaz Parker Cruz Edwards Collins Reyes Stewart Morris Morales Murphy
Cook Rogers Gutierrez Ortiz Morgan Cooper Peterson Bailey Reed Kelly Howard
Ramos Ward Richardson Watson Brooks Chavez Wood James Bennett Gray
Mendoza Ruiz Hughes Price Alvarez Castillo Sanders Patel Myers Long Ross
Foster Jimenez Powell Jenkins Perry Russell Sullivan Bell Coleman Butler
Henderson Barnes Gonzales Fisher Vasquez Simmons Romero Jordan Patterson
Alexander Hamilton Graham Reynolds Griffin Wallace Moreno West Cole Hayes
Bryant Herrera Gibson Ellis Tran Medina Freeman Wells Webb Simpson Stevens
Tucker Porter Hunter Hicks Crawford Henry Boyd Mason Warren Richards Hunt
Black Daniels Palmer Mills Nichols Grant Knight Ferguson Rose Stone Hawkins
Dunn Perkins Hudson Spencer Gardner Stephens Payne Pierce Berry Matthews
Arnold Wagner Willis Watkins Olson Carroll Duncan Snyder Hart Cunningham
Bradley Lane Andrews Harper Riley Armstrong Carpenter Weaver Greene
Lawrence Elliott Rice Little Banks Bishop Carr Hanson Barber Doyle Burgess
Christensen Casey Dalton Dean Erickson Farrell Gates Hardy Kirby Lambert
Maxwell Nixon Osborne Poole Pratt Shepard Swanson Tyler Vaughn Walsh
""".split()
)
