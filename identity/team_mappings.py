"""
Team Mappings - canonical team name -> accepted aliases, per sport

Table-driven on purpose: adding a spelling is a one-line data change.

Rules for the tables:
- The canonical name is itself always an alias (added by the index builder).
- An alias shared by two canonicals of the same sport is dropped from the
  index for that sport (a bare "Wildcats" or "Tigers" is not an identity).
- Matching ignores case, except for aliases that are also ordinary words
  ("NO"), which only match in their table casing.
"""

from typing import Dict, List

TeamTable = Dict[str, List[str]]


MLB_TEAMS: TeamTable = {
    "Diamondbacks": ["Arizona", "Dbacks", "D-backs", "ARI", "AZ"],
    "Braves": ["Atlanta", "ATL"],
    "Orioles": ["Baltimore", "BAL", "O's"],
    "Red Sox": ["Boston", "BOS", "BoSox", "RSox"],
    "Cubs": ["Chicago Cubs", "CHC", "Cubbies"],
    "White Sox": ["Chicago White Sox", "CWS", "CHW", "WSox"],
    "Reds": ["Cincinnati", "CIN"],
    "Guardians": ["Cleveland", "CLE", "Guards"],
    "Rockies": ["Colorado", "COL"],
    "Tigers": ["Detroit", "DET"],
    "Astros": ["Houston", "HOU", "Stros"],
    "Royals": ["Kansas City", "KC", "KCR"],
    "Angels": ["Los Angeles Angels", "LAA", "Halos", "Anaheim"],
    "Dodgers": ["Los Angeles Dodgers", "LAD"],
    "Marlins": ["Miami", "MIA"],
    "Brewers": ["Milwaukee", "MIL", "Brew Crew"],
    "Twins": ["Minnesota", "MIN"],
    "Yankees": ["New York Yankees", "NYY", "Yanks", "Bronx Bombers"],
    "Mets": ["New York Mets", "NYM"],
    "Athletics": ["Oakland", "A's", "OAK", "Sacramento"],
    "Phillies": ["Philadelphia", "PHI", "Phils"],
    "Pirates": ["Pittsburgh", "PIT", "Bucs"],
    "Padres": ["San Diego", "SD", "SDP", "Pads"],
    "Giants": ["San Francisco", "SF", "SFG"],
    "Mariners": ["Seattle", "SEA", "M's"],
    "Cardinals": ["St Louis", "St. Louis", "STL", "Cards", "Redbirds"],
    "Rays": ["Tampa Bay", "TB", "TBR"],
    "Rangers": ["Texas", "TEX"],
    "Blue Jays": ["Toronto", "TOR", "Jays"],
    "Nationals": ["Washington", "WAS", "WSH", "Nats"],
}

NBA_TEAMS: TeamTable = {
    "Hawks": ["Atlanta", "ATL"],
    "Celtics": ["Boston", "BOS"],
    "Nets": ["Brooklyn", "BKN", "BRK"],
    "Hornets": ["Charlotte", "CHA", "CHO"],
    "Bulls": ["Chicago", "CHI"],
    "Cavaliers": ["Cleveland", "CLE", "Cavs"],
    "Mavericks": ["Dallas", "DAL", "Mavs"],
    "Nuggets": ["Denver", "DEN", "Nugs"],
    "Pistons": ["Detroit", "DET"],
    "Warriors": ["Golden State", "GS", "GSW", "Dubs"],
    "Rockets": ["Houston", "HOU"],
    "Pacers": ["Indiana", "IND"],
    "Clippers": ["Los Angeles Clippers", "LA Clippers", "LAC", "Clips"],
    "Lakers": ["Los Angeles Lakers", "LA Lakers", "LAL"],
    "Grizzlies": ["Memphis", "MEM", "Grizz"],
    "Heat": ["Miami", "MIA"],
    "Bucks": ["Milwaukee", "MIL"],
    "Timberwolves": ["Minnesota", "MIN", "Wolves", "TWolves", "T-Wolves"],
    "Pelicans": ["New Orleans", "NO", "NOP", "Pels"],
    "Knicks": ["New York Knicks", "NY", "NYK"],
    "Thunder": ["Oklahoma City", "OKC"],
    "Magic": ["Orlando", "ORL"],
    "76ers": ["Philadelphia", "PHI", "Sixers"],
    "Suns": ["Phoenix", "PHX", "PHO"],
    "Trail Blazers": ["Portland", "POR", "Blazers"],
    "Kings": ["Sacramento", "SAC"],
    "Spurs": ["San Antonio", "SA", "SAS"],
    "Raptors": ["Toronto", "TOR", "Raps"],
    "Jazz": ["Utah", "UTA"],
    "Wizards": ["Washington", "WAS", "WSH", "Wiz"],
}

NFL_TEAMS: TeamTable = {
    "Cardinals": ["Arizona", "ARI", "ARZ"],
    "Falcons": ["Atlanta", "ATL"],
    "Ravens": ["Baltimore", "BAL"],
    "Bills": ["Buffalo", "BUF"],
    "Panthers": ["Carolina", "CAR"],
    "Bears": ["Chicago", "CHI"],
    "Bengals": ["Cincinnati", "CIN", "Cincy"],
    "Browns": ["Cleveland", "CLE"],
    "Cowboys": ["Dallas", "DAL"],
    "Broncos": ["Denver", "DEN"],
    "Lions": ["Detroit", "DET"],
    "Packers": ["Green Bay", "GB", "GNB", "Pack"],
    "Texans": ["Houston", "HOU"],
    "Colts": ["Indianapolis", "IND", "Indy"],
    "Jaguars": ["Jacksonville", "JAX", "JAC", "Jags"],
    "Chiefs": ["Kansas City", "KC", "KAN"],
    "Raiders": ["Las Vegas", "LV", "LVR"],
    "Chargers": ["Los Angeles Chargers", "LA Chargers", "LAC"],
    "Rams": ["Los Angeles Rams", "LA Rams", "LAR"],
    "Dolphins": ["Miami", "MIA", "Phins"],
    "Vikings": ["Minnesota", "MIN", "Vikes"],
    "Patriots": ["New England", "NE", "Pats"],
    "Saints": ["New Orleans", "NO", "NOS"],
    "Giants": ["New York Giants", "NY Giants", "NYG"],
    "Jets": ["New York Jets", "NY Jets", "NYJ"],
    "Eagles": ["Philadelphia", "PHI", "Philly"],
    "Steelers": ["Pittsburgh", "PIT"],
    "49ers": ["San Francisco", "SF", "Niners"],
    "Seahawks": ["Seattle", "SEA"],
    "Buccaneers": ["Tampa Bay", "TB", "Bucs"],
    "Titans": ["Tennessee", "TEN"],
    "Commanders": ["Washington", "WAS", "WSH"],
}

NHL_TEAMS: TeamTable = {
    "Ducks": ["Anaheim", "ANA"],
    "Bruins": ["Boston", "BOS"],
    "Sabres": ["Buffalo", "BUF"],
    "Flames": ["Calgary", "CGY"],
    "Hurricanes": ["Carolina", "CAR", "Canes"],
    "Blackhawks": ["Chicago", "CHI", "Hawks"],
    "Avalanche": ["Colorado", "COL", "Avs"],
    "Blue Jackets": ["Columbus", "CBJ", "Jackets"],
    "Stars": ["Dallas", "DAL"],
    "Red Wings": ["Detroit", "DET", "Wings"],
    "Oilers": ["Edmonton", "EDM"],
    "Panthers": ["Florida", "FLA"],
    "Kings": ["Los Angeles Kings", "LA Kings", "LAK"],
    "Wild": ["Minnesota", "MIN"],
    "Canadiens": ["Montreal", "MTL", "Habs"],
    "Predators": ["Nashville", "NSH", "Preds"],
    "Devils": ["New Jersey", "NJ", "NJD"],
    "Islanders": ["New York Islanders", "NYI", "Isles"],
    "Rangers": ["New York Rangers", "NYR"],
    "Senators": ["Ottawa", "OTT", "Sens"],
    "Flyers": ["Philadelphia", "PHI"],
    "Penguins": ["Pittsburgh", "PIT", "Pens"],
    "Sharks": ["San Jose", "SJ", "SJS"],
    "Kraken": ["Seattle", "SEA"],
    "Blues": ["St Louis", "St. Louis", "STL"],
    "Lightning": ["Tampa Bay", "TB", "TBL", "Bolts"],
    "Maple Leafs": ["Toronto", "TOR", "Leafs"],
    "Utah Mammoth": ["Utah", "UTA", "Mammoth", "Utah Hockey Club"],
    "Canucks": ["Vancouver", "VAN"],
    "Golden Knights": ["Vegas", "VGK", "Knights"],
    "Capitals": ["Washington", "WSH", "Caps"],
    "Jets": ["Winnipeg", "WPG"],
}

WNBA_TEAMS: TeamTable = {
    "Dream": ["Atlanta", "ATL"],
    "Sky": ["Chicago", "CHI"],
    "Sun": ["Connecticut", "CON", "CONN"],
    "Wings": ["Dallas", "DAL"],
    "Valkyries": ["Golden State", "GS", "GSV"],
    "Fever": ["Indiana", "IND"],
    "Aces": ["Las Vegas", "LV", "LVA"],
    "Sparks": ["Los Angeles", "LA", "LAS"],
    "Lynx": ["Minnesota", "MIN"],
    "Liberty": ["New York", "NY", "NYL"],
    "Mercury": ["Phoenix", "PHX", "PHO"],
    "Storm": ["Seattle", "SEA"],
    "Mystics": ["Washington", "WAS", "WSH"],
}

NCAAB_TEAMS: TeamTable = {
    "North Carolina": ["UNC", "Tar Heels", "North Carolina Tar Heels"],
    "Duke": ["Blue Devils", "Duke Blue Devils"],
    "Kentucky": ["UK", "Wildcats", "Kentucky Wildcats"],
    "Kansas": ["KU", "Jayhawks", "Kansas Jayhawks"],
    "Gonzaga": ["Zags", "Gonzaga Bulldogs"],
    "Butler": ["Butler Bulldogs", "Butler University"],
    "Yale": ["Yale Bulldogs", "Yale University"],
    "Drake": ["Drake Bulldogs", "Drake University"],
    "Georgia": ["Georgia Bulldogs", "UGA"],
    "Mississippi State": ["Mississippi State Bulldogs", "Miss State", "MSST"],
    "Fresno State": ["Fresno State Bulldogs", "Fresno"],
    "Louisiana Tech": ["Louisiana Tech Bulldogs", "La Tech"],
    "South Carolina State": ["South Carolina State Bulldogs", "SC State"],
    "Stanford": ["Stanford Cardinal"],
    "Boston University": ["Boston U", "BU Terriers"],
    "Texas A&M Corpus Christi": ["Texas A&M Corpus", "TAMUCC"],
    "Texas A&M": ["Aggies", "Texas A&M Aggies", "TAMU"],
    "Marshall": ["Thundering Herd", "Marshall Thundering Herd"],
    "Dayton": ["Dayton Flyers"],
    "Northern Iowa": ["UNI", "Northern Iowa Panthers"],
    "Auburn": ["Auburn Tigers"],
    "Alabama": ["Bama", "Crimson Tide", "Alabama Crimson Tide"],
    "UConn": ["Connecticut", "Huskies", "UConn Huskies"],
    "Purdue": ["Boilermakers", "Purdue Boilermakers"],
    "Tennessee": ["Vols", "Volunteers", "Tennessee Volunteers"],
    "Houston": ["Cougars", "Houston Cougars"],
    "Iowa State": ["Cyclones", "Iowa State Cyclones"],
    "Marquette": ["Golden Eagles", "Marquette Golden Eagles"],
    "Creighton": ["Bluejays", "Creighton Bluejays"],
    "Villanova": ["Nova", "Wildcats", "Villanova Wildcats"],
    "Baylor": ["Baylor Bears"],
    "Michigan State": ["Spartans", "Michigan State Spartans"],
    "Michigan": ["Wolverines", "Michigan Wolverines"],
    "Indiana": ["IU", "Hoosiers", "Indiana Hoosiers"],
    "Texas": ["Longhorns", "Texas Longhorns"],
    "Arkansas": ["Razorbacks", "Arkansas Razorbacks"],
    "Florida": ["Gators", "Florida Gators"],
    "Ohio State": ["Buckeyes", "Ohio State Buckeyes"],
    "Syracuse": ["Cuse", "Syracuse Orange"],
    "Louisville": ["Louisville Cardinals"],
    "UCLA": ["Bruins", "UCLA Bruins"],
    "Arizona": ["Wildcats", "Arizona Wildcats"],
    "USC": ["Trojans", "USC Trojans"],
    "Oregon": ["Ducks", "Oregon Ducks"],
    "Iowa": ["Hawkeyes", "Iowa Hawkeyes"],
    "Wisconsin": ["Badgers", "Wisconsin Badgers"],
    "Virginia": ["UVA", "Cavaliers", "Virginia Cavaliers"],
    "Georgetown": ["Hoyas", "Georgetown Hoyas"],
    "St. John's": ["St Johns", "Saint John's", "Red Storm"],
    "Memphis": ["Memphis Tigers"],
    "Seton Hall": ["Seton Hall Pirates"],
    "Xavier": ["Musketeers", "Xavier Musketeers"],
    "Cincinnati": ["Bearcats", "Cincinnati Bearcats"],
    "West Virginia": ["WVU", "Mountaineers", "West Virginia Mountaineers"],
    "Pittsburgh": ["Pitt", "Pitt Panthers"],
    "Ole Miss": ["Ole Miss Rebels"],
    "LSU": ["LSU Tigers"],
    "South Carolina": ["Gamecocks", "South Carolina Gamecocks"],
    "TCU": ["Horned Frogs", "TCU Horned Frogs"],
    "Texas Tech": ["Red Raiders", "Texas Tech Red Raiders"],
    "Oklahoma": ["Sooners", "Oklahoma Sooners"],
    "Oklahoma State": ["OK State", "Oklahoma State Cowboys"],
    "Kansas State": ["K State", "K-State", "Kansas State Wildcats"],
    "Colorado": ["Buffs", "Buffaloes", "Colorado Buffaloes"],
    "San Diego State": ["SDSU", "Aztecs", "San Diego State Aztecs"],
    "UNLV": ["Runnin Rebels", "UNLV Rebels"],
    "Boise State": ["Boise State Broncos"],
    "Harvard": ["Harvard Crimson"],
    "Princeton": ["Princeton Tigers"],
    "Penn": ["Pennsylvania", "Quakers"],
    "Cornell": ["Big Red", "Cornell Big Red"],
    "Columbia": ["Columbia Lions"],
    "Brown": ["Brown Bears"],
    "Dartmouth": ["Big Green", "Dartmouth Big Green"],
    "VCU": ["VCU Rams"],
    "George Mason": ["George Mason Patriots"],
    "Old Dominion": ["ODU", "Monarchs"],
    "James Madison": ["JMU", "James Madison Dukes"],
    "William & Mary": ["William and Mary", "Tribe"],
    "Ohio": ["Ohio Bobcats"],
    "Miami (OH)": ["Miami OH", "Miami-OH", "RedHawks"],
    "Miami": ["Miami Hurricanes", "Miami FL", "Miami (FL)"],
    "Kent State": ["Golden Flashes", "Kent State Golden Flashes"],
    "Bowling Green": ["BGSU", "Bowling Green Falcons"],
    "Toledo": ["Toledo Rockets"],
    "Akron": ["Zips", "Akron Zips"],
    "Saint Mary's": ["Saint Marys", "St. Mary's", "Saint Mary's Gaels"],
    "Iona": ["Iona Gaels"],
    "UMass": ["Massachusetts", "Minutemen"],
    "Illinois": ["Illini", "Fighting Illini"],
    "Maryland": ["Terps", "Terrapins"],
    "Rutgers": ["Scarlet Knights"],
    "Nebraska": ["Cornhuskers"],
    "Northwestern": ["Northwestern Wildcats"],
    "Minnesota": ["Golden Gophers", "Gophers"],
    "Penn State": ["Nittany Lions", "PSU"],
    "Clemson": ["Clemson Tigers"],
    "Florida State": ["FSU", "Seminoles", "Noles"],
    "Notre Dame": ["Fighting Irish", "ND"],
    "Wake Forest": ["Demon Deacons"],
    "NC State": ["North Carolina State", "Wolfpack"],
    "Virginia Tech": ["Hokies", "VT"],
    "Georgia Tech": ["Yellow Jackets"],
    "Missouri": ["mizzou"],
    "Vanderbilt": ["Vandy", "Commodores"],
    "Utah": ["Utes"],
    "BYU": ["Brigham Young", "Cougars BYU"],
    "Washington": ["Huskies UW", "UW"],
    "Washington State": ["Wazzu", "Washington St"],
    "Arizona State": ["ASU", "Sun Devils"],
    "Oregon State": ["Beavers"],
    "California": ["Cal", "Golden Bears"],
    "Providence": ["Friars"],
    "DePaul": ["Blue Demons"],
    "Saint Louis": ["Billikens", "SLU"],
    "Wichita State": ["Shockers"],
    "Florida Atlantic": ["FAU", "Owls FAU"],
    "New Mexico": ["Lobos"],
    "Utah State": ["Aggies Utah State", "USU"],
    "Nevada": ["Wolf Pack"],
}

NCAAF_TEAMS: TeamTable = {
    "Alabama": ["Bama", "Crimson Tide"],
    "Georgia": ["UGA", "Georgia Bulldogs"],
    "Ohio State": ["Buckeyes", "OSU"],
    "Michigan": ["Wolverines"],
    "Texas": ["Longhorns"],
    "Texas A&M": ["Aggies", "TAMU"],
    "LSU": ["LSU Tigers"],
    "Auburn": ["Auburn Tigers"],
    "Clemson": ["Clemson Tigers"],
    "Missouri": ["Mizzou"],
    "Oregon": ["Ducks"],
    "USC": ["Trojans"],
    "Notre Dame": ["Fighting Irish", "ND"],
    "Penn State": ["Nittany Lions", "PSU"],
    "Florida State": ["FSU", "Seminoles", "Noles"],
    "Florida": ["Gators"],
    "Miami": ["Miami Hurricanes", "Miami FL", "Miami (FL)", "The U"],
    "Oklahoma": ["Sooners"],
    "Oklahoma State": ["OK State", "Oklahoma State Cowboys"],
    "Tennessee": ["Vols", "Volunteers"],
    "Ole Miss": ["Rebels", "Mississippi"],
    "Mississippi State": ["Miss State", "Mississippi State Bulldogs"],
    "Kentucky": ["Kentucky Wildcats"],
    "South Carolina": ["Gamecocks"],
    "Arkansas": ["Razorbacks", "Hogs"],
    "Vanderbilt": ["Vandy", "Commodores"],
    "Iowa": ["Hawkeyes"],
    "Wisconsin": ["Badgers"],
    "Minnesota": ["Golden Gophers", "Gophers"],
    "Nebraska": ["Cornhuskers", "Huskers"],
    "Illinois": ["Illini", "Fighting Illini"],
    "Indiana": ["Hoosiers"],
    "Purdue": ["Boilermakers"],
    "Michigan State": ["Spartans"],
    "Maryland": ["Terps", "Terrapins"],
    "Rutgers": ["Scarlet Knights"],
    "Northwestern": ["Northwestern Wildcats"],
    "UCLA": ["Bruins"],
    "Washington": ["UW", "Washington Huskies"],
    "Utah": ["Utes"],
    "BYU": ["Brigham Young"],
    "Colorado": ["Buffs", "Buffaloes"],
    "Arizona": ["Arizona Wildcats"],
    "Arizona State": ["ASU", "Sun Devils"],
    "Kansas": ["Jayhawks"],
    "Kansas State": ["K State", "K-State"],
    "Iowa State": ["Cyclones"],
    "Baylor": ["Baylor Bears"],
    "TCU": ["Horned Frogs"],
    "Texas Tech": ["Red Raiders"],
    "West Virginia": ["WVU", "Mountaineers"],
    "Cincinnati": ["Bearcats"],
    "Houston": ["Houston Cougars"],
    "UCF": ["Central Florida", "Knights UCF"],
    "Louisville": ["Louisville Cardinals"],
    "Pittsburgh": ["Pitt", "Pitt Panthers"],
    "Syracuse": ["Cuse", "Syracuse Orange"],
    "Virginia Tech": ["Hokies", "VT"],
    "Virginia": ["UVA", "Cavaliers"],
    "North Carolina": ["UNC", "Tar Heels"],
    "NC State": ["North Carolina State", "Wolfpack"],
    "Duke": ["Blue Devils"],
    "Wake Forest": ["Demon Deacons"],
    "Georgia Tech": ["Yellow Jackets"],
    "Boston College": ["BC Eagles"],
    "Stanford": ["Stanford Cardinal"],
    "California": ["Cal", "Golden Bears"],
    "SMU": ["Mustangs"],
    "Boise State": ["Boise State Broncos"],
    "Oregon State": ["Beavers"],
    "Washington State": ["Wazzu", "Washington St"],
    "San Diego State": ["SDSU", "Aztecs"],
    "Fresno State": ["Fresno"],
    "Memphis": ["Memphis Tigers"],
    "Tulane": ["Green Wave"],
    "Army": ["Black Knights"],
    "Navy": ["Midshipmen"],
    "Air Force": ["Falcons AFA"],
    "Liberty": ["Liberty Flames"],
    "James Madison": ["JMU", "James Madison Dukes"],
    "Toledo": ["Toledo Rockets"],
    "Marshall": ["Thundering Herd"],
    "Appalachian State": ["App State", "Mountaineers App State"],
}


# Order matters: when a name could belong to several sports and no sport is
# given, the earlier table wins ties on alias length.
TEAM_MAPPINGS: Dict[str, TeamTable] = {
    "NFL": NFL_TEAMS,
    "NBA": NBA_TEAMS,
    "MLB": MLB_TEAMS,
    "NHL": NHL_TEAMS,
    "WNBA": WNBA_TEAMS,
    "NCAAB": NCAAB_TEAMS,
    "NCAAF": NCAAF_TEAMS,
}


__all__ = ["TeamTable", "TEAM_MAPPINGS"]
