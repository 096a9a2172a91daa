"""Built-in order sample shown when the live sheet cannot be loaded."""

SAMPLE_CSV = """\
Darkstore Name,Brand Name,Created At,Import At,Assigned At,Confirmed At,Printed At,Manifest At
Andheri,Myntra,8/1/2025 10:20:00 AM,8/1/2025 10:29:00 AM,8/1/2025 10:31:00 AM,8/1/2025 10:40:00 AM,8/1/2025 10:50:00 AM,8/1/2025 10:55:00 AM
Andheri,Myntra,8/2/2025 9:20:00 AM,8/2/2025 10:29:00 AM,8/2/2025 10:31:00 AM,8/2/2025 10:40:00 AM,8/2/2025 10:50:00 AM,8/2/2025 10:55:00 AM
Andheri,Myntra,8/3/2025 10:10:00 AM,8/3/2025 10:29:00 AM,8/3/2025 10:31:00 AM,8/3/2025 10:40:00 AM,8/3/2025 10:50:00 AM,8/3/2025 10:55:00 AM
Andheri,Ajio,8/4/2025 10:00:00 AM,8/4/2025 10:29:00 AM,8/4/2025 10:31:00 AM,8/4/2025 10:40:00 AM,8/4/2025 10:50:00 AM,8/4/2025 10:55:00 AM
Andheri,Ajio,8/5/2025 10:22:00 AM,8/5/2025 10:29:00 AM,8/5/2025 10:31:00 AM,8/5/2025 10:40:00 AM,8/5/2025 10:50:00 AM,8/5/2025 10:55:00 AM
Andheri,Ajio,8/6/2025 10:22:00 AM,8/6/2025 10:29:00 AM,8/6/2025 10:31:00 AM,8/6/2025 10:40:00 AM,8/6/2025 10:50:00 AM,8/6/2025 10:55:00 AM
Andheri,Ajio,8/7/2025 10:22:00 AM,8/7/2025 10:29:00 AM,8/7/2025 10:31:00 AM,8/7/2025 10:40:00 AM,8/7/2025 10:50:00 AM,8/7/2025 10:55:00 AM
Thane,Ajio,8/8/2025 10:22:00 AM,8/8/2025 10:29:00 AM,8/8/2025 10:31:00 AM,8/8/2025 10:40:00 AM,8/8/2025 10:50:00 AM,8/8/2025 10:55:00 AM
Thane,Ajio,8/9/2025 10:20:00 AM,8/9/2025 10:29:00 AM,8/9/2025 10:31:00 AM,8/9/2025 10:40:00 AM,8/9/2025 10:50:00 AM,8/9/2025 10:55:00 AM
Thane,Ajio,8/10/2025 10:20:00 AM,8/10/2025 10:29:00 AM,8/10/2025 10:31:00 AM,8/10/2025 10:40:00 AM,8/10/2025 10:50:00 AM,8/10/2025 10:55:00 AM
Thane,Ajio,8/11/2025 10:20:00 AM,8/11/2025 10:29:00 AM,8/11/2025 10:31:00 AM,8/11/2025 10:40:00 AM,8/11/2025 10:50:00 AM,8/11/2025 10:55:00 AM
Thane,Adidas,8/12/2025 10:20:00 AM,8/12/2025 10:29:00 AM,8/12/2025 10:31:00 AM,8/12/2025 10:40:00 AM,8/12/2025 10:50:00 AM,8/12/2025 10:55:00 AM
Thane,Adidas,8/13/2025 10:20:00 AM,8/13/2025 10:29:00 AM,8/13/2025 10:31:00 AM,8/13/2025 10:40:00 AM,8/13/2025 10:50:00 AM,8/13/2025 10:55:00 AM
Thane,Adidas,8/14/2025 10:20:00 AM,8/14/2025 10:29:00 AM,8/14/2025 10:31:00 AM,8/14/2025 10:40:00 AM,8/14/2025 10:50:00 AM,8/14/2025 10:55:00 AM
Kolaba,Puma,8/15/2025 10:20:00 AM,8/15/2025 10:29:00 AM,8/15/2025 10:31:00 AM,8/15/2025 10:40:00 AM,8/15/2025 10:50:00 AM,8/15/2025 10:55:00 AM
Kolaba,Puma,8/16/2025 10:20:00 AM,8/16/2025 10:29:00 AM,8/16/2025 10:31:00 AM,8/16/2025 10:40:00 AM,8/16/2025 10:50:00 AM,8/16/2025 10:55:00 AM
Kolaba,Puma,8/17/2025 10:20:00 AM,8/17/2025 10:29:00 AM,8/17/2025 10:31:00 AM,8/17/2025 10:40:00 AM,8/17/2025 10:50:00 AM,8/17/2025 10:55:00 AM
Kolaba,Apple,8/18/2025 10:20:00 AM,8/18/2025 10:29:00 AM,8/18/2025 10:31:00 AM,8/18/2025 10:40:00 AM,8/18/2025 10:50:00 AM,8/18/2025 10:55:00 AM
Kolaba,Apple,8/19/2025 10:20:00 AM,8/19/2025 10:29:00 AM,8/19/2025 10:31:00 AM,8/19/2025 10:40:00 AM,8/19/2025 10:50:00 AM,8/19/2025 10:55:00 AM
Kolaba,Apple,8/20/2025 10:20:00 AM,8/20/2025 10:29:00 AM,8/20/2025 10:31:00 AM,8/20/2025 10:40:00 AM,8/20/2025 10:50:00 AM,8/20/2025 10:55:00 AM
Mumbai Central,Nike,8/21/2025 9:15:00 AM,8/21/2025 9:25:00 AM,8/21/2025 9:27:00 AM,8/21/2025 9:35:00 AM,8/21/2025 9:45:00 AM,8/21/2025 9:50:00 AM
Mumbai Central,Nike,8/22/2025 11:30:00 AM,8/22/2025 11:40:00 AM,8/22/2025 11:42:00 AM,8/22/2025 11:50:00 AM,8/22/2025 12:00:00 PM,8/22/2025 12:05:00 PM
Powai,Samsung,8/23/2025 2:45:00 PM,8/23/2025 2:55:00 PM,8/23/2025 2:57:00 PM,8/23/2025 3:05:00 PM,8/23/2025 3:15:00 PM,8/23/2025 3:20:00 PM
Powai,Samsung,8/24/2025 4:10:00 PM,8/24/2025 4:20:00 PM,8/24/2025 4:22:00 PM,8/24/2025 4:30:00 PM,8/24/2025 4:40:00 PM,8/24/2025 4:45:00 PM
"""
