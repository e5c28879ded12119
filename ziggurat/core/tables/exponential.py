"""Precomputed modified ziggurat tables for the standard exponential distribution.

The ziggurat has 252 layers of volume 1/256 each; the remaining 1/256 * 4 of the
density is covered by 252 concave overhangs and the tail.

Volumes outside the layers:

- concave overhangs: 96.6972%
- tail:               3.3028%

``X`` and ``Y`` are scaled by 2^-63 so a uniform 63-bit integer ``u`` maps to
``X[i] * u`` without a separate division. ``IPMF`` holds alias thresholds scaled
by 2^64 and offset by -2^63 so they compare directly against a signed 64-bit draw.
"""

from .base import ZigguratTables

# Number of layers; also the exclusive upper bound of the fast path.
I_MAX = 252

# Maximum distance (scaled by 2^63) of the pdf below any overhang hypotenuse.
# Approximately 0.0926.
E_MAX = 853965788476313647

# Start of the tail: X[0] * 2^63.
X_0 = 7.569274694148063

MAP = (
    0, 0, 1, 235, 3, 4, 5, 0,
    0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 1, 1, 1, 1, 2, 2,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 252, 252, 252, 252,
    252, 251, 251, 251, 251, 251, 251, 251,
    251, 251, 251, 251, 251, 251, 250, 250,
    250, 250, 250, 250, 250, 249, 249, 249,
    249, 249, 249, 248, 248, 248, 248, 247,
    247, 247, 247, 246, 246, 246, 245, 245,
    244, 244, 243, 243, 242, 241, 241, 240,
    239, 237, 3, 3, 4, 4, 6, 0,
    0, 0, 0, 236, 237, 238, 239, 240,
    241, 242, 243, 244, 245, 246, 247, 248,
    249, 250, 251, 252, 2, 0, 0, 0,
)

IPMF = (
    9223372036854774016, 1623796909450834944, 2664290944894291200, 7387971354164060928,
    6515064486552723200, 8840508362680718848, 6099647593382936320, 7673130333659513856,
    6220332867583438080, 5045979640552813824, 4075305837223955456, 3258413672162525440,
    2560664887087762432, 1957224924672899584, 1429800935350577408, 964606309710808320,
    551043923599587072, 180827629096890368, -152619738120023552, -454588624410291456,
    -729385126147774976, -980551509819447040, -1211029700667463936, -1423284293868548352,
    -1619396356369050368, -1801135830956211712, -1970018048575618048, -2127348289059705344,
    -2274257249303686400, -2411729520096655360, -2540626634159181056, -2661705860113406464,
    -2775635634532450560, -2883008316030465280, -2984350790383654912, -3080133339198116352,
    -3170777096303091200, -3256660348483819008, -3338123885075136256, -3415475560473299200,
    -3488994201966428160, -3558932970354473216, -3625522261068041216, -3688972217741989376,
    -3749474917563782656, -3807206277531056128, -3862327722496843520, -3914987649156779776,
    -3965322714631865344, -4013458973776895488, -4059512885612783360, -4103592206186241024,
    -4145796782586128128, -4186219260694347008, -4224945717447275264, -4262056226866285568,
    -4297625367836519680, -4331722680528537344, -4364413077437472512, -4395757214229401600,
    -4425811824915135744, -4454630025296932608, -4482261588141290496, -4508753193105288192,
    -4534148654077808896, -4558489126279958272, -4581813295192216576, -4604157549138257664,
    -4625556137145255168, -4646041313519104512, -4665643470413305856, -4684391259530326528,
    -4702311703971761664, -4719430301145103360, -4735771117539946240, -4751356876102087168,
    -4766209036859133952, -4780347871386013440, -4793792531638892032, -4806561113635132672,
    -4818670716409306624, -4830137496634465536, -4840976719260837888, -4851202804490348800,
    -4860829371376460032, -4869869278311657472, -4878334660640771072, -4886236965617427200,
    -4893586984900802560, -4900394884772702720, -4906670234238885376, -4912422031164496896,
    -4917658726580119808, -4922388247283532288, -4926618016851066624, -4930354975163335168,
    -4933605596540651264, -4936375906575303936, -4938671497741366016, -4940497543854575616,
    -4941858813449629440, -4942759682136114944, -4943204143989086720, -4943195822025528064,
    -4942737977813206528, -4941833520255033344, -4940485013586738944, -4938694684624359424,
    -4936464429291795968, -4933795818458825728, -4930690103114057984, -4927148218896864000,
    -4923170790008275968, -4918758132519213568, -4913910257091645696, -4908626871126539264,
    -4902907380349533952, -4896750889844272896, -4890156204540531200, -4883121829162554368,
    -4875645967641781248, -4867726521994927104, -4859361090668103424, -4850546966345113600,
    -4841281133215539200, -4831560263698491904, -4821380714613447424, -4810738522790066176,
    -4799629400105481984, -4788048727936307200, -4775991551010514944, -4763452570642114304,
    -4750426137329494528, -4736906242696389120, -4722886510751377664, -4708360188440089088,
    -4693320135461421056, -4677758813316108032, -4661668273553489152, -4645040145179241472,
    -4627865621182772224, -4610135444140930048, -4591839890849345536, -4572968755929961472,
    -4553511334358205696, -4533456402849101568, -4512792200036279040, -4491506405372580864,
    -4469586116675402496, -4447017826233107968, -4423787395382284800, -4399880027458416384,
    -4375280239014115072, -4349971829190472192, -4323937847117721856, -4297160557210933504,
    -4269621402214949888, -4241300963840749312, -4212178920821861632, -4182234004204451584,
    -4151443949668877312, -4119785446662287616, -4087234084103201536, -4053764292396156928,
    -4019349281473081856, -3983960974549692672, -3947569937258423296, -3910145301787345664,
    -3871654685619032064, -3832064104425388800, -3791337878631544832, -3749438533114327552,
    -3706326689447984384, -3661960950051848192, -3616297773528534784, -3569291340409189376,
    -3520893408440946176, -3471053156460654336, -3419717015797782528, -3366828488034805504,
    -3312327947826460416, -3256152429334010368, -3198235394669719040, -3138506482563172864,
    -3076891235255162880, -3013310801389730816, -2947681612411374848, -2879915029671670784,
    -2809916959107513856, -2737587429961866240, -2662820133571325696, -2585501917733380096,
    -2505512231579385344, -2422722515205211648, -2336995527534088448, -2248184604988727552,
    -2156132842510765056, -2060672187261025536, -1961622433929371904, -1858790108950105600,
    -1751967229002895616, -1640929916937142784, -1525436855617582592, -1405227557075253248,
    -1280020420662650112, -1149510549536596224, -1013367289578704896, -871231448632104192,
    -722712146453667840, -567383236774436096, -404779231966938368, -234390647591545856,
    -55658667960119296, 132030985907841280, 329355128892811776, 537061298001085184,
    755977262693564160, 987022116608033280, 1231219266829431296, 1489711711346518528,
    1763780090187553792, 2054864117341795072, 2364588157623768832, 2694791916990503168,
    3047567482883476224, 3425304305830816256, 3830744187097297920, 4267048975685830400,
    4737884547990017280, 5247525842198998272, 5800989391535355392, 6404202162993295360,
    7064218894258540544, 7789505049452331520, 8590309807749444864, 7643763810684489984,
    8891950541491446016, 5457384281016206080, 9083704440929284096, 7976211653914433280,
    8178631350487117568, 2821287825726744832, 6322989683301709568, 4309503753387611392,
    4685170734960170496, 8404845967535199744, 7330522972447554048, 1960945799076992000,
    4742910674644899072, -751799822533509888, 7023456603741959936, 3843116882594676224,
    3927231442413903104, -9223372036854775808, -9223372036854775808, -9223372036854775808,
)

# Layer lengths; X[I_MAX] = 0.
X = (
    8.2066240675348816e-19, 7.3973732351607284e-19, 6.9133313377915293e-19, 6.5647358820964533e-19,
    6.2912539959818508e-19, 6.0657224129604964e-19, 5.8735276103737269e-19, 5.7058850528536941e-19,
    5.557094569162239e-19, 5.4232438903743953e-19, 5.3015297696508776e-19, 5.1898739257708062e-19,
    5.086692261799833e-19, 4.9907492938796469e-19, 4.9010625894449536e-19, 4.8168379010649187e-19,
    4.7374238653644714e-19, 4.6622795807196824e-19, 4.5909509017784048e-19, 4.5230527790658154e-19,
    4.458255881635396e-19, 4.3962763126368381e-19, 4.336867596710647e-19, 4.2798143618469714e-19,
    4.2249273027064889e-19, 4.172039125346411e-19, 4.1210012522465616e-19, 4.0716811225869233e-19,
    4.0239599631006903e-19, 3.9777309342877357e-19, 3.9328975785334499e-19, 3.8893725129310323e-19,
    3.8470763218720385e-19, 3.8059366138180143e-19, 3.765887213854473e-19, 3.7268674692030177e-19,
    3.6888216492248162e-19, 3.6516984248800068e-19, 3.6154504153287473e-19, 3.5800337915318032e-19,
    3.5454079284533432e-19, 3.5115350988784242e-19, 3.4783802030030962e-19, 3.4459105288907336e-19,
    3.4140955396563316e-19, 3.3829066838741162e-19, 3.3523172262289001e-19, 3.3223020958685874e-19,
    3.2928377502804472e-19, 3.2639020528202049e-19, 3.2354741622810815e-19, 3.2075344331080789e-19,
    3.1800643250478609e-19, 3.1530463211820845e-19, 3.1264638534265134e-19, 3.1003012346934211e-19,
    3.0745435970137301e-19, 3.0491768350005559e-19, 3.0241875541094565e-19, 2.999563023214455e-19,
    2.9752911310742592e-19, 2.9513603463113224e-19, 2.9277596805684267e-19, 2.9044786545442563e-19,
    2.8815072666416712e-19, 2.8588359639906928e-19, 2.8364556156331615e-19, 2.8143574876779799e-19,
    2.7925332202553125e-19, 2.7709748061152879e-19, 2.7496745707320232e-19, 2.7286251537873397e-19,
    2.7078194919206054e-19, 2.687250802641905e-19, 2.6669125693153442e-19, 2.6467985271278891e-19,
    2.6269026499668434e-19, 2.6072191381359757e-19, 2.5877424068465143e-19, 2.5684670754248168e-19,
    2.5493879571835479e-19, 2.5305000499077481e-19, 2.511798526911271e-19, 2.4932787286227806e-19,
    2.474936154663866e-19, 2.4567664563848669e-19, 2.4387654298267842e-19, 2.4209290090801527e-19,
    2.4032532600140538e-19, 2.3857343743505147e-19, 2.3683686640614648e-19, 2.3511525560671253e-19,
    2.3340825872163284e-19, 2.3171553995306794e-19, 2.3003677356958333e-19, 2.2837164347843482e-19,
    2.2671984281957174e-19, 2.2508107358001938e-19, 2.2345504622739592e-19, 2.2184147936140775e-19,
    2.2024009938224424e-19, 2.1865064017486842e-19, 2.1707284280826716e-19, 2.1550645524878675e-19,
    2.1395123208673778e-19, 2.124069342755064e-19, 2.1087332888245875e-19, 2.0935018885097035e-19,
    2.0783729277295508e-19, 2.0633442467130712e-19, 2.0484137379170616e-19, 2.0335793440326865e-19,
    2.018839056075609e-19, 2.0041909115551697e-19, 1.9896329927183254e-19, 1.975163424864309e-19,
    1.9607803747261946e-19, 1.9464820489157862e-19, 1.9322666924284314e-19, 1.9181325872045647e-19,
    1.9040780507449479e-19, 1.8901014347767504e-19, 1.8762011239677479e-19, 1.8623755346860768e-19,
    1.8486231138030984e-19, 1.8349423375370566e-19, 1.8213317103353295e-19, 1.8077897637931708e-19,
    1.7943150556069476e-19, 1.7809061685599652e-19, 1.7675617095390567e-19, 1.7542803085801941e-19,
    1.7410606179414531e-19, 1.727901311201724e-19, 1.7148010823836362e-19, 1.7017586450992059e-19,
    1.6887727317167824e-19, 1.6758420925479093e-19, 1.6629654950527621e-19, 1.6501417230628659e-19,
    1.6373695760198277e-19, 1.624647868228856e-19, 1.6119754281258616e-19, 1.5993510975569615e-19,
    1.5867737310692309e-19, 1.5742421952115544e-19, 1.5617553678444595e-19, 1.5493121374578016e-19,
    1.5369114024951992e-19, 1.5245520706841019e-19, 1.5122330583703858e-19, 1.4999532898563561e-19,
    1.4877116967410352e-19, 1.4755072172615974e-19, 1.4633387956347966e-19, 1.4512053813972103e-19,
    1.4391059287430991e-19, 1.4270393958586506e-19, 1.4150047442513381e-19, 1.4030009380730888e-19,
    1.3910269434359025e-19, 1.3790817277185197e-19, 1.3671642588626657e-19, 1.3552735046573446e-19,
    1.3434084320095729e-19, 1.3315680061998685e-19, 1.3197511901207148e-19, 1.3079569434961214e-19,
    1.2961842220802957e-19, 1.2844319768333099e-19, 1.2726991530715219e-19, 1.2609846895903523e-19,
    1.2492875177568625e-19, 1.237606560569394e-19, 1.2259407316813331e-19, 1.2142889343858445e-19,
    1.2026500605581765e-19, 1.1910229895518744e-19, 1.1794065870449425e-19, 1.1677997038316715e-19,
    1.1562011745554883e-19, 1.1446098163777869e-19, 1.1330244275772562e-19, 1.1214437860737343e-19,
    1.109866647870073e-19, 1.0982917454048923e-19, 1.0867177858084351e-19, 1.0751434490529747e-19,
    1.0635673859884002e-19, 1.0519882162526621e-19, 1.0404045260457141e-19, 1.0288148657544097e-19,
    1.0172177474144965e-19, 1.0056116419943559e-19, 9.9399497648346677e-20, 9.8236613076667446e-20,
    9.7072343426320094e-20, 9.5906516230690634e-20, 9.4738953224154196e-20, 9.3569469920159036e-20,
    9.2397875154569468e-20, 9.1223970590556472e-20, 9.0047550180852874e-20, 8.8868399582647627e-20,
    8.768629551976745e-20, 8.6501005086071005e-20, 8.5312284983141187e-20, 8.4119880684385214e-20,
    8.292352551651342e-20, 8.1722939648034506e-20, 8.0517828972839211e-20, 7.9307883875099226e-20,
    7.8092777859524425e-20, 7.6872166028429042e-20, 7.5645683383965122e-20, 7.4412942930179128e-20,
    7.3173533545093332e-20, 7.1927017587631075e-20, 7.0672928197666785e-20, 6.9410766239500362e-20,
    6.8139996829256425e-20, 6.6860045374610234e-20, 6.5570293040210081e-20, 6.4270071533368528e-20,
    6.2958657080923559e-20, 6.1635263438143136e-20, 6.02990337321517e-20, 5.8949030892850181e-20,
    5.758422635988593e-20, 5.6203486669597397e-20, 5.4805557413499315e-20, 5.3389043909003295e-20,
    5.1952387717989917e-20, 5.0493837866338355e-20, 4.9011415222629489e-20, 4.7502867933366117e-20,
    4.5965615001265455e-20, 4.4396673897997565e-20, 4.2792566302148588e-20, 4.1149193273430015e-20,
    3.9461666762606287e-20, 3.7724077131401685e-20, 3.592916408620436e-20, 3.4067836691100565e-20,
    3.2128447641564046e-20, 3.0095646916399994e-20, 2.7948469455598328e-20, 2.5656913048718645e-20,
    2.3175209756803909e-20, 2.0426695228251291e-20, 1.7261770330213488e-20, 1.3281889259442579e-20,
    0,
)

# pdf(X); Y[I_MAX] = pdf(0).
Y = (
    5.595205495112736e-23, 1.1802509982703313e-22, 1.8444423386735829e-22, 2.5439030466698309e-22,
    3.2737694311509334e-22, 4.0307732132706715e-22, 4.8125478319495115e-22, 5.6172914896583308e-22,
    6.4435820540443526e-22, 7.2902662343463681e-22, 8.1563888456321941e-22, 9.0411453683482223e-22,
    9.9438488486399206e-22, 1.0863906045969114e-21, 1.1800799775461269e-21, 1.2754075534831208e-21,
    1.372333117637729e-21, 1.4708208794375214e-21, 1.5708388257440445e-21, 1.6723581984374566e-21,
    1.7753530675030514e-21, 1.8797999785104595e-21, 1.9856776587832504e-21, 2.0929667704053244e-21,
    2.201649700995824e-21, 2.3117103852306179e-21, 2.4231341516125464e-21, 2.5359075901420891e-21,
    2.6500184374170538e-21, 2.7654554763660391e-21, 2.8822084483468604e-21, 3.0002679757547711e-21,
    3.1196254936130377e-21, 3.2402731888801749e-21, 3.3622039464187092e-21, 3.4854113007409036e-21,
    3.6098893927859475e-21, 3.7356329310971768e-21, 3.8626371568620053e-21, 3.9908978123552837e-21,
    4.1204111123918948e-21, 4.2511737184488913e-21, 4.3831827151633737e-21, 4.5164355889510656e-21,
    4.6509302085234806e-21, 4.7866648071096003e-21, 4.9236379662119969e-21, 5.0618486007478993e-21,
    5.2012959454434732e-21, 5.3419795423648946e-21, 5.4838992294830959e-21, 5.6270551301806347e-21,
    5.7714476436191935e-21, 5.9170774358950678e-21, 6.0639454319177027e-21, 6.2120528079531677e-21,
    6.3614009847804375e-21, 6.5119916214136427e-21, 6.6638266093481696e-21, 6.8169080672926277e-21,
    6.9712383363524377e-21, 7.1268199756340822e-21, 7.2836557582420336e-21, 7.4417486676430174e-21,
    7.6011018943746355e-21, 7.7617188330775411e-21, 7.9236030798322572e-21, 8.0867584297834842e-21,
    8.2511888750363333e-21, 8.4168986028103258e-21, 8.5838919938383098e-21, 8.7521736209986459e-21,
    8.9217482481700712e-21, 9.0926208292996504e-21, 9.2647965076751277e-21, 9.4382806153938292e-21,
    9.6130786730210328e-21, 9.7891963894314161e-21, 9.966639661827884e-21, 1.0145414575932636e-20,
    1.0325527406345955e-20, 1.0506984617068672e-20, 1.0689792862184811e-20, 1.0873958986701341e-20,
    1.10594900275424e-20, 1.1246393214695825e-20, 1.1434675972510121e-20, 1.1624345921140471e-20,
    1.1815410878142659e-20, 1.2007878860214202e-20, 1.2201758085082226e-20, 1.239705697353804e-20,
    1.2593784151618565e-20, 1.2791948452935152e-20, 1.29915589211506e-20, 1.3192624812605428e-20,
    1.3395155599094805e-20, 1.3599160970797774e-20, 1.3804650839360727e-20, 1.4011635341137284e-20,
    1.4220124840587164e-20, 1.4430129933836705e-20, 1.4641661452404201e-20, 1.485473046709328e-20,
    1.5069348292058084e-20, 1.5285526489044053e-20, 1.5503276871808626e-20, 1.5722611510726402e-20,
    1.5943542737583543e-20, 1.6166083150566702e-20, 1.6390245619451956e-20, 1.6616043290999594e-20,
    1.6843489594561079e-20, 1.7072598247904713e-20, 1.7303383263267072e-20, 1.7535858953637607e-20,
    1.7770039939284241e-20, 1.8005941154528286e-20, 1.8243577854777398e-20, 1.8482965623825808e-20,
    1.8724120381431627e-20, 1.8967058391181452e-20, 1.9211796268653192e-20, 1.9458350989888484e-20,
    1.9706739900186868e-20, 1.9956980723234356e-20, 2.0209091570579904e-20, 2.0463090951473895e-20,
    2.0718997783083593e-20, 2.097683140110135e-20, 2.123661157076213e-20, 2.1498358498287976e-20,
    2.1762092842777868e-20, 2.2027835728562592e-20, 2.2295608758045219e-20, 2.2565434025049041e-20,
    2.2837334128696004e-20, 2.311133218784001e-20, 2.3387451856080863e-20, 2.3665717337386111e-20,
    2.394615340234961e-20, 2.422878540511741e-20, 2.4513639301013211e-20, 2.4800741664897764e-20,
    2.5090119710298442e-20, 2.5381801309347597e-20, 2.56758150135705e-20, 2.5972190075566336e-20,
    2.6270956471628253e-20, 2.6572144925351523e-20, 2.6875786932281841e-20, 2.7181914785659148e-20,
    2.7490561603315974e-20, 2.7801761355793055e-20, 2.8115548895739172e-20, 2.8431959988666534e-20,
    2.8751031345137833e-20, 2.9072800654466307e-20, 2.9397306620015486e-20, 2.9724588996191657e-20,
    3.0054688627228112e-20, 3.0387647487867642e-20, 3.0723508726057078e-20, 3.1062316707775905e-20,
    3.1404117064129991e-20, 3.1748956740850969e-20, 3.2096884050352357e-20, 3.2447948726504914e-20,
    3.2802201982306013e-20, 3.3159696570631373e-20, 3.352048684827223e-20, 3.3884628843476888e-20,
    3.4252180327233346e-20, 3.4623200888548644e-20, 3.4997752014001677e-20, 3.537589717186906e-20,
    3.5757701901149035e-20, 3.6143233905835799e-20, 3.65325631548274e-20, 3.6925761987883572e-20,
    3.7322905228086981e-20, 3.7724070301302117e-20, 3.8129337363171041e-20, 3.8538789434235234e-20,
    3.8952512543827862e-20, 3.9370595883442399e-20, 3.9793131970351439e-20, 4.0220216822325769e-20,
    4.0651950144388133e-20, 4.1088435528630944e-20, 4.1529780668232712e-20, 4.1976097586926582e-20,
    4.2427502885307452e-20, 4.2884118005513604e-20, 4.3346069515987453e-20, 4.3813489418210257e-20,
    4.4286515477520838e-20, 4.4765291580372353e-20, 4.5249968120658306e-20, 4.5740702418054417e-20,
    4.6237659171683015e-20, 4.6741010952818368e-20, 4.7250938740823415e-20, 4.7767632507051219e-20,
    4.8291291852069895e-20, 4.8822126702292804e-20, 4.9360358072933852e-20, 4.9906218905182021e-20,
    5.0459954986625539e-20, 5.1021825965285324e-20, 5.1592106469178258e-20, 5.2171087345169234e-20,
    5.2759077033045284e-20, 5.3356403093325858e-20, 5.3963413910399511e-20, 5.4580480596259246e-20,
    5.5207999124535584e-20, 5.584639272987383e-20, 5.649611461419377e-20, 5.7157651009290713e-20,
    5.7831524654956632e-20, 5.8518298763794323e-20, 5.9218581558791713e-20, 5.99330314883387e-20,
    6.0662363246796887e-20, 6.1407354758435e-20, 6.2168855320499763e-20, 6.2947795150103727e-20,
    6.3745196643214394e-20, 6.4562187737537985e-20, 6.5400017881889097e-20, 6.6260077263309343e-20,
    6.714392014514662e-20, 6.8053293447301698e-20, 6.8990172088133e-20, 6.9956803158564498e-20,
    7.095576179487843e-20, 7.199002278894508e-20, 7.3063053739105458e-20, 7.4178938266266881e-20,
    7.5342542134173124e-20, 7.6559742171142969e-20, 7.783774986341285e-20, 7.9185582674029512e-20,
    8.06147755373533e-20, 8.2140502769818073e-20, 8.3783445978280519e-20, 8.5573129249678161e-20,
    8.75544596695901e-20, 8.9802388057706877e-20, 9.2462471421151086e-20, 9.5919641344951721e-20,
    1.0842021724855044e-19,
)

EXPONENTIAL_TABLES = ZigguratTables(
    name="exponential",
    i_max=I_MAX,
    x_0=X_0,
    x=X,
    y=Y,
    alias_map=MAP,
    ipmf=IPMF,
)
