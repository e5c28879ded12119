"""Precomputed modified ziggurat tables for the standard normal distribution.

Only the positive half of the density is tabulated; the sign is applied by the
sampler. The ziggurat has 253 layers of volume 1/256 each.

Volumes outside the layers:

- concave overhangs:  76.1941%
- inflection overhang: 0.1358%
- convex overhangs:   21.3072%
- tail:                2.3629%

See :mod:`ziggurat.core.tables.exponential` for the scaling conventions.
"""

from .base import ZigguratTables

# Number of layers; also the exclusive upper bound of the fast path.
I_MAX = 253

# Overhang containing the inflection point x=1 (largest X[j] below 1).
# Overhangs j < J_INFLECTION are concave, j > J_INFLECTION convex.
J_INFLECTION = 204

# Maximum distance (scaled by 2^63) of a convex pdf above the hypotenuse,
# approximately 0.2460. Stored negated since points above the hypotenuse
# have a negative distance.
CONVEX_E_MAX = -2269182951627976004

# Maximum distance (scaled by 2^63) of a concave pdf below the hypotenuse,
# approximately 0.08244.
CONCAVE_E_MAX = 760463704284035184

# Start of the tail: X[0] * 2^63.
X_0 = 3.6360066255009455861
ONE_OVER_X_0 = 1.0 / X_0

MAP = (
    0, 0, 239, 2, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 1, 1, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 253, 253, 253, 253, 253, 253,
    253, 253, 252, 252, 252, 252, 252, 252,
    252, 252, 252, 252, 251, 251, 251, 251,
    251, 251, 251, 250, 250, 250, 250, 250,
    249, 249, 249, 248, 248, 248, 247, 247,
    247, 246, 246, 245, 244, 244, 243, 242,
    240, 2, 2, 3, 3, 0, 0, 240,
    241, 242, 243, 244, 245, 246, 247, 248,
    249, 250, 251, 252, 253, 1, 0, 0,
)

IPMF = (
    9223372036854775296, 1100243796534090752, 7866600928998383104, 6788754710675124736,
    9022865200181688320, 6522434035205502208, 4723064097360024576, 3360495653216416000,
    2289663232373870848, 1423968905551920384, 708364817827798016, 106102487305601280,
    -408333464665794560, -853239722779025152, -1242095211825521408, -1585059631105762048,
    -1889943050287169024, -2162852901990669824, -2408637386594511104, -2631196530262954496,
    -2833704942520925696, -3018774289025787392, -3188573753472222208, -3344920681707410944,
    -3489349705062150656, -3623166100042179584, -3747487436868335360, -3863276422712173824,
    -3971367044063130880, -4072485557029824000, -4167267476830916608, -4256271432240159744,
    -4339990541927306752, -4418861817133802240, -4493273980372377088, -4563574004462246656,
    -4630072609770453760, -4693048910430964992, -4752754358862894848, -4809416110052769536,
    -4863239903586985984, -4914412541515875840, -4963104028439161088, -5009469424769119232,
    -5053650458856559360, -5095776932695077632, -5135967952544929024, -5174333008451230720,
    -5210972924952654336, -5245980700100460288, -5279442247516297472, -5311437055462369280,
    -5342038772315650560, -5371315728843297024, -5399331404632512768, -5426144845448965120,
    -5451811038519422464, -5476381248265593088, -5499903320558339072, -5522421955752311296,
    -5543978956085263616, -5564613449659060480, -5584362093436146432, -5603259257517428736,
    -5621337193070986240, -5638626184974132224, -5655154691220933888, -5670949470294763008,
    -5686035697601807872, -5700437072199152384, -5714175914219812352, -5727273255295220992,
    -5739748920271997440, -5751621603810412032, -5762908939773946112, -5773627565915007744,
    -5783793183152377600, -5793420610475628544, -5802523835894661376, -5811116062947570176,
    -5819209754516120832, -5826816672854571776, -5833947916825278208, -5840613956570608128,
    -5846824665591763456, -5852589350491075328, -5857916778480726528, -5862815203334800384,
    -5867292388935742464, -5871355631762284032, -5875011781262890752, -5878267259039093760,
    -5881128076579883520, -5883599852028851456, -5885687825288565248, -5887396872144963840,
    -5888731517955042304, -5889695949247728384, -5890294025706689792, -5890529289910829568,
    -5890404977675987456, -5889924026487208448, -5889089083913555968, -5887902514965209344,
    -5886366408898372096, -5884482585690639872, -5882252601321090304, -5879677752995027712,
    -5876759083794175232, -5873497386318840832, -5869893206505510144, -5865946846617024256,
    -5861658367354159104, -5857027590486131456, -5852054100063428352, -5846737243971504640,
    -5841076134082373632, -5835069647234580480, -5828716424754549248, -5822014871949021952,
    -5814963157357531648, -5807559211080072192, -5799800723447229952, -5791685142338073344,
    -5783209670985158912, -5774371264582489344, -5765166627072226560, -5755592207057667840,
    -5745644193442049280, -5735318510777133824, -5724610813433666560, -5713516480340333056,
    -5702030608556698112, -5690148005851018752, -5677863184109371904, -5665170350903313408,
    -5652063400924580608, -5638535907000141312, -5624581109999480320, -5610191908627599872,
    -5595360848093632768, -5580080108034218752, -5564341489875549952, -5548136403221394688,
    -5531455851545399296, -5514290416593586944, -5496630242226406656, -5478465016761742848,
    -5459783954986665216, -5440575777891777024, -5420828692432397824, -5400530368638773504,
    -5379667916699401728, -5358227861294116864, -5336196115274292224, -5313557951078385920,
    -5290297970633451520, -5266400072915222272, -5241847420214015744, -5216622401043726592,
    -5190706591719534080, -5164080714589203200, -5136724594099067136, -5108617109269313024,
    -5079736143458214912, -5050058530461741312, -5019559997031891968, -4988215100963582976,
    -4955997165645491968, -4922878208652041728, -4888828866780320000, -4853818314258475776,
    -4817814175855180032, -4780782432601701888, -4742687321746719232, -4703491227581444608,
    -4663154564978699264, -4621635653358766336, -4578890580370785792, -4534873055659683584,
    -4489534251700611840, -4442822631898829568, -4394683764809104128, -4345060121983362560,
    -4293890858708922880, -4241111576153830144, -4186654061692619008, -4130446006804747776,
    -4072410698657718784, -4012466683838401024, -3950527400305017856, -3886500774061896704,
    -3820288777467837184, -3751786943594897664, -3680883832433527808, -3607460442623922176,
    -3531389562483324160, -3452535052891361792, -3370751053395887872, -3285881101633968128,
    -3197757155301365504, -3106198503156485376, -3011010550911937280, -2911983463883580928,
    -2808890647470271744, -2701487041141149952, -2589507199690603520, -2472663129329160192,
    -2350641842139870464, -2223102583770035200, -2089673683684728576, -1949948966090106880,
    -1803483646855993856, -1649789631480328192, -1488330106139747584, -1318513295725618176,
    -1139685236927327232, -951121376596854784, -752016768184775936, -541474585642866432,
    -318492605725778432, -81947227249193216, 169425512612864512, 437052607232193536,
    722551297568809984, 1027761939299714304, 1354787941622770432, 1706044619203941632,
    2084319374409574144, 2492846399593711360, 2935400169348532480, 3416413484613111552,
    3941127949860576256, 4515787798793437952, 5147892401439714304, 5846529325380406016,
    6622819682216655360, 7490522659874166016, 8466869998277892096, 8216968526387345408,
    4550693915488934656, 7628019504138977280, 6605080500908005888, 7121156327650272512,
    2484871780331574272, 7179104797032803328, 7066086283830045440, 1516500120817362944,
    216305945438803456, 6295963418525324544, 2889316805630113280, -2712587580533804032,
    6562498853538167040, 7975754821147501312, -9223372036854775808, -9223372036854775808,
)

# Layer lengths; X[I_MAX] = 0.
X = (
    3.9421662825398133e-19, 3.7204945004119012e-19, 3.5827024480628678e-19, 3.4807476236540249e-19,
    3.3990177171882136e-19, 3.3303778360340139e-19, 3.270943881761755e-19, 3.21835771324951e-19,
    3.1710758541840432e-19, 3.1280307407034065e-19, 3.0884520655804019e-19, 3.0517650624107352e-19,
    3.01752902925846e-19, 2.985398344070532e-19, 2.9550967462801797e-19, 2.9263997988491663e-19,
    2.8991225869977476e-19, 2.8731108780226291e-19, 2.8482346327101335e-19, 2.8243831535194389e-19,
    2.8014613964727031e-19, 2.7793871261807797e-19, 2.7580886921411212e-19, 2.7375032698308758e-19,
    2.7175754543391047e-19, 2.6982561247538484e-19, 2.6795015188771505e-19, 2.6612724730440033e-19,
    2.6435337927976633e-19, 2.6262537282028438e-19, 2.6094035335224142e-19, 2.5929570954331002e-19,
    2.5768906173214726e-19, 2.5611823497719608e-19, 2.5458123593393361e-19, 2.5307623292372459e-19,
    2.51601538677984e-19, 2.5015559533646191e-19, 2.4873696135403158e-19, 2.4734430003079206e-19,
    2.4597636942892726e-19, 2.446320134791245e-19, 2.4331015411139206e-19, 2.4200978427132955e-19,
    2.4072996170445879e-19, 2.3946980340903347e-19, 2.3822848067252674e-19, 2.3700521461931801e-19,
    2.357992722074133e-19, 2.3460996262069972e-19, 2.3343663401054455e-19, 2.322786705467384e-19,
    2.3113548974303765e-19, 2.3000654002704238e-19, 2.2889129852797606e-19, 2.2778926905921897e-19,
    2.2669998027527321e-19, 2.2562298398527416e-19, 2.245578536072726e-19, 2.2350418274933911e-19,
    2.2246158390513294e-19, 2.2142968725296249e-19, 2.2040813954857555e-19, 2.1939660310297601e-19,
    2.1839475483749618e-19, 2.1740228540916853e-19, 2.1641889840016519e-19, 2.1544430956570613e-19,
    2.1447824613540345e-19, 2.1352044616350571e-19, 2.1257065792395107e-19, 2.1162863934653125e-19,
    2.1069415749082026e-19, 2.0976698805483467e-19, 2.0884691491567363e-19, 2.0793372969963634e-19,
    2.0702723137954107e-19, 2.0612722589717129e-19, 2.0523352580895635e-19, 2.0434594995315797e-19,
    2.0346432313698148e-19, 2.0258847584216418e-19, 2.0171824394771313e-19, 2.0085346846857531e-19,
    1.9999399530912015e-19, 1.9913967503040585e-19, 1.9829036263028144e-19, 1.9744591733545175e-19,
    1.9660620240469857e-19, 1.9577108494251485e-19, 1.9494043572246307e-19, 1.9411412901962161e-19,
    1.9329204245152935e-19, 1.9247405682708168e-19, 1.9166005600287074e-19, 1.9084992674649826e-19,
    1.900435586064234e-19, 1.8924084378793725e-19, 1.8844167703488436e-19, 1.8764595551677749e-19,
    1.868535787209745e-19, 1.8606444834960934e-19, 1.8527846822098793e-19, 1.8449554417517928e-19,
    1.8371558398354868e-19, 1.8293849726199566e-19, 1.8216419538767393e-19, 1.8139259141898448e-19,
    1.8062360001864453e-19, 1.7985713737964743e-19, 1.7909312115393845e-19, 1.78331470383642e-19,
    1.7757210543468428e-19, 1.7681494793266395e-19, 1.760599207008314e-19, 1.7530694770004409e-19,
    1.7455595397057217e-19, 1.7380686557563475e-19, 1.7305960954655264e-19, 1.7231411382940904e-19,
    1.7157030723311378e-19, 1.7082811937877138e-19, 1.7008748065025788e-19, 1.6934832214591352e-19,
    1.6861057563126349e-19, 1.6787417349268046e-19, 1.6713904869190636e-19, 1.6640513472135291e-19,
    1.6567236556010242e-19, 1.6494067563053266e-19, 1.6420999975549115e-19, 1.6348027311594532e-19,
    1.6275143120903661e-19, 1.6202340980646725e-19, 1.6129614491314931e-19, 1.6056957272604589e-19,
    1.5984362959313479e-19, 1.5911825197242491e-19, 1.5839337639095554e-19, 1.57668939403708e-19,
    1.5694487755235889e-19, 1.5622112732380261e-19, 1.554976251083707e-19, 1.5477430715767271e-19,
    1.540511095419833e-19, 1.5332796810709688e-19, 1.5260481843056974e-19, 1.5188159577726683e-19,
    1.5115823505412761e-19, 1.5043467076406199e-19, 1.4971083695888395e-19, 1.4898666719118714e-19,
    1.4826209446506113e-19, 1.4753705118554365e-19, 1.468114691066983e-19, 1.4608527927820112e-19,
    1.4535841199031451e-19, 1.4463079671711862e-19, 1.4390236205786415e-19, 1.4317303567630177e-19,
    1.4244274423783481e-19, 1.4171141334433217e-19, 1.4097896746642792e-19, 1.4024532987312287e-19,
    1.3951042255849034e-19, 1.3877416616527576e-19, 1.3803647990516385e-19, 1.3729728147547174e-19,
    1.3655648697200824e-19, 1.3581401079782068e-19, 1.3506976556752901e-19, 1.3432366200692418e-19,
    1.3357560884748263e-19, 1.3282551271542047e-19, 1.3207327801488087e-19, 1.3131880680481524e-19,
    1.3056199866908076e-19, 1.2980275057923788e-19, 1.2904095674948608e-19, 1.2827650848312727e-19,
    1.2750929400989213e-19, 1.2673919831340482e-19, 1.2596610294799512e-19, 1.2518988584399374e-19,
    1.2441042110056523e-19, 1.2362757876504165e-19, 1.2284122459762072e-19, 1.2205121982017852e-19,
    1.2125742084782245e-19, 1.2045967900166973e-19, 1.196578402011802e-19, 1.1885174463419555e-19,
    1.1804122640264091e-19, 1.1722611314162064e-19, 1.1640622560939109e-19, 1.1558137724540874e-19,
    1.1475137369333185e-19, 1.1391601228549047e-19, 1.1307508148492592e-19, 1.1222836028063025e-19,
    1.1137561753107903e-19, 1.1051661125053526e-19, 1.0965108783189755e-19, 1.0877878119905372e-19,
    1.0789941188076655e-19, 1.070126859970364e-19, 1.0611829414763286e-19, 1.0521591019102928e-19,
    1.0430518990027552e-19, 1.0338576948035472e-19, 1.0245726392923699e-19, 1.015192652220931e-19,
    1.0057134029488235e-19, 9.9613028799672809e-20, 9.8643840599459914e-20, 9.7663252964755816e-20,
    9.6670707427623454e-20, 9.566560624086667e-20, 9.4647308380433213e-20, 9.3615125017323508e-20,
    9.2568314370887282e-20, 9.1506075837638774e-20, 9.0427543267725716e-20, 8.933177723376368e-20,
    8.8217756102327883e-20, 8.7084365674892319e-20, 8.5930387109612162e-20, 8.4754482764244349e-20,
    8.3555179508462343e-20, 8.2330848933585364e-20, 8.1079683729129853e-20, 7.9799669284133864e-20,
    7.8488549286072745e-20, 7.7143783700934692e-20, 7.5762496979467566e-20, 7.4341413578485329e-20,
    7.2876776807378431e-20, 7.1364245443525374e-20, 6.9798760240761066e-20, 6.8174368944799054e-20,
    6.6483992986198539e-20, 6.4719110345162767e-20, 6.2869314813103699e-20, 6.0921687548281263e-20,
    5.8859873575576818e-20, 5.6662675116090981e-20, 5.4301813630894571e-20, 5.173817174449422e-20,
    4.8915031722398545e-20, 4.5744741890755301e-20, 4.2078802568583416e-20, 3.7625986722404761e-20,
    3.1628589805881879e-20, 0,
)

# pdf(X) without the 1/sqrt(2*pi) normalisation; Y[I_MAX] = 1 * 2^-63.
Y = (
    1.4598410796619063e-22, 3.0066613427942797e-22, 4.6129728815103466e-22, 6.2663350049234362e-22,
    7.9594524761881544e-22, 9.6874655021705039e-22, 1.1446877002379439e-21, 1.3235036304379167e-21,
    1.5049857692053131e-21, 1.6889653000719298e-21, 1.8753025382711626e-21, 2.0638798423695191e-21,
    2.2545966913644708e-21, 2.4473661518801799e-21, 2.6421122727763533e-21, 2.8387681187879908e-21,
    3.0372742567457284e-21, 3.2375775699986589e-21, 3.439630315794878e-21, 3.6433893657997798e-21,
    3.8488155868912312e-21, 4.0558733309492775e-21, 4.264530010428359e-21, 4.4747557422305067e-21,
    4.6865230465355582e-21, 4.8998065902775257e-21, 5.1145829672105489e-21, 5.3308305082046173e-21,
    5.5485291167031758e-21, 5.7676601252690476e-21, 5.9882061699178461e-21, 6.2101510795442221e-21,
    6.4334797782257209e-21, 6.6581781985713897e-21, 6.8842332045893181e-21, 7.1116325227957095e-21,
    7.3403646804903092e-21, 7.5704189502886418e-21, 7.8017853001379744e-21, 8.0344543481570017e-21,
    8.2684173217333118e-21, 8.5036660203915022e-21, 8.7401927820109521e-21, 8.9779904520281901e-21,
    9.2170523553061439e-21, 9.457372270392882e-21, 9.698944405926943e-21, 9.9417633789758424e-21,
    1.0185824195119818e-20, 1.043112223011477e-20, 1.0677653212987396e-20, 1.0925413210432004e-20,
    1.1174398612392891e-20, 1.1424606118728715e-20, 1.1676032726866302e-20, 1.1928675720361027e-20,
    1.2182532658289373e-20, 1.2437601365406785e-20, 1.2693879923010674e-20, 1.2951366660454145e-20,
    1.3210060147261461e-20, 1.3469959185800733e-20, 1.3731062804473644e-20, 1.3993370251385596e-20,
    1.4256880988463136e-20, 1.4521594685988369e-20, 1.4787511217522902e-20, 1.505463065519617e-20,
    1.5322953265335218e-20, 1.5592479504415048e-20, 1.5863210015310328e-20, 1.6135145623830982e-20,
    1.6408287335525592e-20, 1.6682636332737932e-20, 1.6958193971903124e-20, 1.7234961781071113e-20,
    1.7512941457646084e-20, 1.7792134866331487e-20, 1.807254403727107e-20, 1.8354171164377277e-20,
    1.8637018603838945e-20, 1.8921088872801004e-20, 1.9206384648209468e-20, 1.9492908765815636e-20,
    1.9780664219333857e-20, 2.0069654159747839e-20, 2.0359881894760859e-20, 2.0651350888385696e-20,
    2.0944064760670539e-20, 2.1238027287557466e-20, 2.1533242400870487e-20, 2.1829714188430474e-20,
    2.2127446894294597e-20, 2.242644491911827e-20, 2.2726712820637798e-20, 2.3028255314272276e-20,
    2.3331077273843558e-20, 2.3635183732413286e-20, 2.3940579883236352e-20, 2.4247271080830277e-20,
    2.455526284216033e-20, 2.4864560847940368e-20, 2.5175170944049622e-20, 2.5487099143065929e-20,
    2.5800351625915997e-20, 2.6114934743643687e-20, 2.6430855019297323e-20, 2.6748119149937411e-20,
    2.7066734008766247e-20, 2.7386706647381193e-20, 2.7708044298153558e-20, 2.8030754376735269e-20,
    2.8354844484695747e-20, 2.8680322412291631e-20, 2.9007196141372126e-20, 2.9335473848423219e-20,
    2.9665163907753988e-20, 2.9996274894828624e-20, 3.0328815589748056e-20, 3.0662794980885287e-20,
    3.099822226867876e-20, 3.1335106869588609e-20, 3.1673458420220558e-20, 3.2013286781622988e-20,
    3.2354602043762612e-20, 3.2697414530184806e-20, 3.304173480286495e-20, 3.3387573667257349e-20,
    3.3734942177548938e-20, 3.4083851642125208e-20, 3.4434313629256243e-20, 3.4786339973011376e-20,
    3.5139942779411164e-20, 3.5495134432826171e-20, 3.585192760263246e-20, 3.6210335250134172e-20,
    3.6570370635764384e-20, 3.6932047326575882e-20, 3.7295379204034252e-20, 3.7660380472126401e-20,
    3.8027065665798284e-20, 3.8395449659736649e-20, 3.8765547677510167e-20, 3.9137375301086406e-20,
    3.9510948480742172e-20, 3.988628354538543e-20, 4.0263397213308566e-20, 4.0642306603393541e-20,
    4.1023029246790967e-20, 4.1405583099096438e-20, 4.1789986553048817e-20, 4.2176258451776819e-20,
    4.2564418102621759e-20, 4.2954485291566197e-20, 4.3346480298300118e-20, 4.3740423911958146e-20,
    4.4136337447563716e-20, 4.4534242763218286e-20, 4.4934162278076256e-20, 4.5336118991149025e-20,
    4.5740136500984466e-20, 4.6146239026271279e-20, 4.6554451427421133e-20, 4.6964799229185088e-20,
    4.7377308644364938e-20, 4.7792006598684169e-20, 4.8208920756888113e-20, 4.8628079550147814e-20,
    4.9049512204847653e-20, 4.9473248772842596e-20, 4.9899320163277674e-20, 5.0327758176068971e-20,
    5.0758595537153414e-20, 5.1191865935622696e-20, 5.1627604062866059e-20, 5.2065845653856416e-20,
    5.2506627530725194e-20, 5.2949987648783448e-20, 5.3395965145159426e-20, 5.3844600390237576e-20,
    5.4295935042099358e-20, 5.4750012104183868e-20, 5.5206875986405073e-20, 5.5666572569983821e-20,
    5.6129149276275792e-20, 5.6594655139902476e-20, 5.7063140886520563e-20, 5.7534659015596918e-20,
    5.8009263888591218e-20, 5.8487011822987583e-20, 5.8967961192659803e-20, 5.9452172535103471e-20,
    5.9939708666122605e-20, 6.0430634802618929e-20, 6.0925018694200531e-20, 6.142293076440286e-20,
    6.1924444262401531e-20, 6.2429635426193939e-20, 6.2938583658336214e-20, 6.3451371715447563e-20,
    6.3968085912834963e-20, 6.4488816345752736e-20, 6.5013657128995346e-20, 6.5542706656731714e-20,
    6.6076067884730717e-20, 6.6613848637404196e-20, 6.715616194241298e-20, 6.770312639595058e-20,
    6.8254866562246408e-20, 6.8811513411327825e-20, 6.9373204799659681e-20, 6.9940085998959109e-20,
    7.0512310279279503e-20, 7.1090039553397167e-20, 7.1673445090644796e-20, 7.2262708309655784e-20,
    7.2858021661057338e-20, 7.34595896130358e-20, 7.4067629754967553e-20, 7.4682374037052817e-20,
    7.5304070167226666e-20, 7.5932983190698547e-20, 7.6569397282483754e-20, 7.7213617789487678e-20,
    7.7865973566417016e-20, 7.8526819659456755e-20, 7.919654040385056e-20, 7.9875553017037968e-20,
    8.056431178890163e-20, 8.1263312996426176e-20, 8.1973100703706304e-20, 8.2694273652634034e-20,
    8.3427493508836792e-20, 8.4173494807453416e-20, 8.4933097052832066e-20, 8.5707219578230905e-20,
    8.6496899985930695e-20, 8.7303317295655327e-20, 8.8127821378859504e-20, 8.8971970928196666e-20,
    8.9837583239314064e-20, 9.0726800697869543e-20, 9.1642181484063544e-20, 9.2586826406702765e-20,
    9.3564561480278864e-20, 9.4580210012636175e-20, 9.5640015550850358e-20, 9.675233477050313e-20,
    9.7928851697808831e-20, 9.9186905857531331e-20, 1.0055456271343397e-19, 1.0208407377305566e-19,
    1.0390360993240711e-19, 1.0842021724855044e-19,
)

GAUSSIAN_TABLES = ZigguratTables(
    name="gaussian",
    i_max=I_MAX,
    x_0=X_0,
    x=X,
    y=Y,
    alias_map=MAP,
    ipmf=IPMF,
)
